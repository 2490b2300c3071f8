"""Constants for the ingestion delivery layer (S3 / MinIO event format)."""

FIELD_RECORDS = "Records"
FIELD_EVENT_NAME = "eventName"
FIELD_S3 = "s3"
FIELD_BUCKET = "bucket"
FIELD_NAME = "name"
FIELD_OBJECT = "object"
FIELD_KEY = "key"
FIELD_SIZE = "size"
FIELD_ETAG = "eTag"
FIELD_ETAG_ALT = "etag"
FIELD_USER_IDENTITY = "userIdentity"
FIELD_PRINCIPAL_ID = "principalId"
