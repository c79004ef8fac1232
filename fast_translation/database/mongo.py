import logging
import os
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from fast_translation.config import TRANSLATIONS_COLLECTION
from fast_translation.exceptions import DatabaseNotInitializedException, EnvMissingException

mongo: Optional[AsyncIOMotorClient] = None
db: Optional[AsyncIOMotorDatabase] = None

async def setup_mongo():
    global mongo, db
    db_name = os.getenv('DB_NAME', 'db') if not os.getenv('TEST_ENV') else os.getenv('TEST_DB_NAME', 'test_db')

    if not os.getenv('MONGO_URI'):
        raise EnvMissingException("MONGO_URI")

    mongo = AsyncIOMotorClient(os.getenv('MONGO_URI'), tz_aware=True)
    db = mongo[db_name]

    logging.debug(f"Connected to MongoDB database: {db_name}")


async def get_mongo():
    global mongo
    if mongo is None:
        await setup_mongo()
    return mongo


async def get_db():
    global db
    if db is None:
        await setup_mongo()
    return db


async def get_translations_collection(name: Optional[str] = None) -> AsyncIOMotorCollection:
    database = await get_db()
    if database is None:
        raise DatabaseNotInitializedException()
    return database[name or TRANSLATIONS_COLLECTION]


async def clear():
    global mongo, db
    if mongo is not None:
        mongo.close()
    mongo = None
    db = None
