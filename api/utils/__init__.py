# Utils module for the Portfolio Backend API

# Auth helpers
from .auth_utils import (
    bearer_scheme,
    verify_password,
    create_access_token,
    decode_access_token,
    require_admin
)

# IO helpers
from .io_helpers import (
    read_csv_uploads,
    build_preferences,
    parse_categorization_field,
    load_stored_preferences
)
