from sqlalchemy import create_engine, Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Spec(Base):
    """Remote mirror of one catalog record."""
    __tablename__ = 'specs'

    id = Column(String, primary_key=True)
    model = Column(String, index=True, nullable=False)
    category = Column(String, index=True, nullable=False)
    item = Column(Text, nullable=False)
    value = Column(Text, nullable=False)
    note = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True))


class VehicleModel(Base):
    __tablename__ = 'models'

    id = Column(String, primary_key=True)    # Model token (e.g. "350D")
    name = Column(String, nullable=False)    # Display name (e.g. "ZONTES 350D")
    parts_engine_url = Column(Text, nullable=True)
    parts_chassis_url = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True))


def get_engine(db_url='sqlite:///specs.db'):
    return create_engine(db_url)


def init_db(engine):
    """Create the remote tables if they do not exist yet."""
    Base.metadata.create_all(engine)
