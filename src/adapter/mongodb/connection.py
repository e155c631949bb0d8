import logging
from dataclasses import dataclass

from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

CLIENT_OPTIONS = {
    'tz_aware': True,  # reset_token_expire is compared against aware datetimes
    'serverSelectionTimeoutMS': 5000,
    'connectTimeoutMS': 5000,
    'socketTimeoutMS': 30000,
    'maxPoolSize': 10,
    'retryWrites': True,
    'retryReads': True,
}


@dataclass
class _ClientState:
    client: MongoClient | None = None
    connected_once: bool = False
    unusable: bool = False


_state = _ClientState()


def reset_client():
    global _state
    _state = _ClientState()


def _ping(client: MongoClient) -> bool:
    try:
        client.admin.command('ping')
        return True
    except PyMongoError:
        return False


def get_mongodb_client(mongo_url: str | None) -> MongoClient | None:
    """Return a process-wide MongoClient, or None when the store is unreachable.

    A cached client that stops answering pings is replaced. A missing URL or
    a failed first connection marks the store unusable for the rest of the
    process; failures after a successful first connection are retried on
    the next call.
    """
    if _state.client is not None:
        if _ping(_state.client):
            return _state.client
        logger.debug("[MONGODB] Cached client failed ping, reconnecting")
        _state.client = None

    if _state.unusable:
        return None

    if not mongo_url:
        logger.error("[MONGODB] MONGO_URL not configured")
        _state.unusable = True
        return None

    try:
        client = MongoClient(mongo_url, **CLIENT_OPTIONS)
    except PyMongoError as e:
        logger.error("[MONGODB] Invalid connection settings", extra={"error": str(e)[:200]})
        _state.unusable = True
        return None

    if not _ping(client):
        if not _state.connected_once:
            logger.error("[MONGODB] Initial connection failed")
            _state.unusable = True
        return None

    if not _state.connected_once:
        logger.info("[MONGODB] Connected successfully")
    _state.connected_once = True
    _state.client = client
    return client
