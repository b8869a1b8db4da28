from sqlalchemy.exc import SQLAlchemyError

# Storage errors are not wrapped: whatever SQLAlchemy/the driver raises reaches the caller as-is.
StorageFailure = SQLAlchemyError
