from .database import build_engine, check_database_health, create_db_and_tables, engine, get_db_session

__all__ = ["build_engine", "check_database_health", "create_db_and_tables", "engine", "get_db_session"]
