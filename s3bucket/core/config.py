"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bucket defaults loaded from environment variables.

    Credentials are deliberately absent: boto3's default credential chain
    (environment, shared config files, instance metadata) supplies them
    when a session is created.
    """

    # Bucket identity
    AWS_REGION: str = ""
    S3_BUCKET: str = ""

    # Client
    S3_ENDPOINT_URL: str = ""  # empty means the public AWS endpoint
    S3_ADDRESSING_STYLE: str = "virtual"
    S3_SIGNATURE_VERSION: str = "s3v4"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")
