"""Human model."""

from sqlalchemy import BigInteger, Column, Integer, String

from app.db.base import Base


class Human(Base):
    """A person to greet."""

    __tablename__ = "human"

    # SQLite only autoincrements INTEGER primary keys
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"Human[id={self.id}, name={self.name!r}]"
