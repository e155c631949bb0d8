"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import DependencyError, DuplicateError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('reset_token', 1)], 'idx_users_reset_token', sparse=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            password_hash=doc.get('password_hash'),
            reset_token=doc.get('reset_token'),
            reset_token_expire=doc.get('reset_token_expire'),
        )

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Create a new user and return the User object.

        Raises:
            DuplicateError: the unique email index rejected the insert
            DependencyError: any other store failure
        """
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'email': email,
            'password_hash': password_hash,
            'name': name,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateError("Email already registered") from e
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to create user") from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to look up user") from e
        return self._to_domain(doc) if doc else None

    def get_by_id(self, user_id: str) -> User | None:
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise DependencyError("Failed to look up user") from e
        return self._to_domain(doc) if doc else None

    def set_reset_token(self, email: str, token: str, expire: datetime) -> User | None:
        """Set both reset fields in one update; any earlier token is replaced."""
        try:
            doc = self.collection.find_one_and_update(
                {'email': email},
                {'$set': {
                    'reset_token': token,
                    'reset_token_expire': expire,
                    'updated_at': datetime.now(timezone.utc),
                }},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to set reset token", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to store reset token") from e
        return self._to_domain(doc) if doc else None

    def consume_reset_token(self, token: str, password_hash: str, now: datetime) -> User | None:
        """Match-and-clear in a single find_one_and_update.

        Two concurrent calls with the same token cannot both match: the first
        one unsets ``reset_token`` before the second is evaluated.
        """
        try:
            doc = self.collection.find_one_and_update(
                {'reset_token': token, 'reset_token_expire': {'$gt': now}},
                {
                    '$set': {'password_hash': password_hash, 'updated_at': now},
                    '$unset': {'reset_token': '', 'reset_token_expire': ''},
                },
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("Failed to consume reset token", extra={"error": str(e)})
            raise DependencyError("Failed to reset password") from e
        return self._to_domain(doc) if doc else None
