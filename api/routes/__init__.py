# Route modules for the Portfolio Backend API
