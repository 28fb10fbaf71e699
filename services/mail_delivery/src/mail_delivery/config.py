from pydantic_settings import BaseSettings, SettingsConfigDict


class BrevoConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BREVO_")

    api_key: str = ""
    from_email: str = ""
    base_url: str = "https://api.brevo.com"


class SendGridConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SENDGRID_")

    api_key: str = ""
    from_email: str = ""
    base_url: str = "https://api.sendgrid.com"


class SmtpConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SMTP_")

    host: str = "smtp.gmail.com"
    port: int = 587
    user: str = ""
    password: str = ""
    timeout_seconds: float = 10.0

    @property
    def implicit_tls(self) -> bool:
        """Port 465 speaks TLS from the first byte; others upgrade via STARTTLS."""
        return self.port == 465


class SenderConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EMAIL_")

    from_name: str = "SoteROS Emergency Management"
    from_address: str = ""

    def address(self, override: str = "") -> str:
        """Provider-specific sender address, falling back to the default."""
        return override or self.from_address


class DeliveryConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DELIVERY_")

    log_level: str = "INFO"
    provider_timeout_seconds: float = 10.0
    batch_max_workers: int = 1
