# Shared configuration, schemas, storage and logging for the Portfolio Backend
