from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="RECIBO_", extra="ignore")

    received_by: str = "Teresita Portillo"
    phone: str = "6682311921"

    signature_path: str = "assets/Firma.png"
    output_filename: str = "recibo-pago.pdf"

    storage_backend: str = "local"
    storage_local_path: str = "./recibos"

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
