from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from flashbook.config import settings

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def init_db(bind=None):
    """Create all tables"""
    # Import models so they register on Base.metadata
    import flashbook.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)

def reset_db(bind=None):
    """Drop and recreate all tables"""
    import flashbook.models  # noqa: F401
    bind = bind or engine
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
