import os
from dotenv import load_dotenv

load_dotenv()

db_backend = os.getenv("DB_BACKEND", "sqlite")
user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT")
db_name = os.getenv("DB_NAME")
sqlite_path = os.getenv("SQLITE_PATH")
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
create_tables = os.getenv("CREATE_TABLES", "true").lower() == "true"

if __name__ == "__main__":
    print(db_backend, user, host, port, db_name, sqlite_path, log_level)
