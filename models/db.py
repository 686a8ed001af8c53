from motor.motor_asyncio import AsyncIOMotorClient

from config import DB_HOST, DB_NAME, DB_PORT, MONGO_URI

if MONGO_URI:
    client = AsyncIOMotorClient(MONGO_URI)
    # If URI contains /<db name> -> get_default_database() works
    db = client.get_default_database(default=DB_NAME)
else:
    client = AsyncIOMotorClient(f"mongodb://{DB_HOST}:{DB_PORT}")
    db = client[DB_NAME]
