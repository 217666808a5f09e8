"""Database Configuration and Connection Management Module

This module handles MongoDB connectivity and persistence of generated interview
batches. One AsyncIOMotorClient is created at application startup and shared by
all requests; Motor clients are safe for concurrent use, so no extra locking is
applied here.

Only a write path exists. Batches are appended to the interviews collection and
never read back or modified by this service.

Dependencies:
- motor: For async MongoDB interactions.
- pymongo: For MongoDB error types.
- loguru: For logging operations.
- app.schemas.interview_questions: For the InterviewBatch schema.
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from loguru import logger
from app.errors.exceptions import PersistenceError
from app.schemas.interview_questions import InterviewBatch

INTERVIEW_COLLECTION = "interviews"


class RecordStore:
    """
    Persists InterviewBatch documents.

    Attributes:
        collection (AsyncIOMotorCollection): Target collection for batches.
    """

    def __init__(self, collection: AsyncIOMotorCollection, client: AsyncIOMotorClient = None):
        self.collection = collection
        self.client = client

    async def save_batch(self, batch: InterviewBatch) -> str:
        """
        Insert one generated batch.

        Args:
            batch (InterviewBatch): Request fields plus parsed records.

        Returns:
            str: The inserted document id.

        Raises:
            ValueError: If the batch has no questions.
            PersistenceError: If MongoDB rejects the write or is unreachable.
        """
        if not batch.questions:
            raise ValueError("Refusing to persist a batch with no questions")

        try:
            result = await self.collection.insert_one(batch.to_document())
        except PyMongoError as e:
            logger.error(f"MongoDB save error: {e}")
            raise PersistenceError(str(e)) from e

        logger.info(f"Saved {len(batch.questions)} interview questions as {result.inserted_id}")
        return str(result.inserted_id)

    async def ping(self) -> bool:
        """Check that the server answers. Not used by the health route."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB client closed")


def create_record_store(mongodb_uri: str, default_db: str) -> RecordStore:
    """
    Create the shared MongoDB client and the store on top of it.

    The database named in the connection string wins; default_db is used when
    the URI carries none.
    """
    client = AsyncIOMotorClient(mongodb_uri)
    db = client.get_default_database(default=default_db)
    logger.info(f"MongoDB client created for database '{db.name}'")
    return RecordStore(db[INTERVIEW_COLLECTION], client=client)
