from functools import lru_cache

from fastapi import Depends, HTTPException

from adapter.external.litellm import LiteLLMAdapter
from adapter.external.smtp_mailer import DisabledMailer, SmtpMailer
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.user_repository import MongoUserRepository
from port.llm import LLMPort
from port.mailer import MailerPort
from port.user_repository import UserRepository
from services.analysis_service import PropertyAnalysisService
from utils.config import Settings


@lru_cache
def get_settings() -> Settings:
    """Build Settings once per process."""
    return Settings.from_env()


def _get_db(settings: Settings):
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client(settings.mongo_url)
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[settings.database_name]


def get_user_repo(settings: Settings = Depends(get_settings)) -> UserRepository:
    return MongoUserRepository(_get_db(settings))


def build_mailer(settings: Settings) -> MailerPort:
    if not settings.enable_email:
        return DisabledMailer()
    return SmtpMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.email_user,
        password=settings.email_password,
        from_email=settings.email_from,
    )


def get_mailer(settings: Settings = Depends(get_settings)) -> MailerPort:
    return build_mailer(settings)


def get_llm_port(settings: Settings = Depends(get_settings)) -> LLMPort:
    """LLM adapter, or 503 when no API key is configured."""
    if not settings.llm_enabled:
        raise HTTPException(status_code=503, detail="AI analysis is not configured")
    return LiteLLMAdapter(api_key=settings.openai_api_key)


def get_analysis_service(
    llm: LLMPort = Depends(get_llm_port),
    settings: Settings = Depends(get_settings),
) -> PropertyAnalysisService:
    return PropertyAnalysisService(llm, model=settings.llm_model)
