import enum
from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from app.database import Base


class AgeRating(str, enum.Enum):
    GENERAL = "Livre"
    CHILDREN = "Infantil"
    YOUNG_ADULT = "Infantojuvenil"
    ADULT = "Adulto"


# User model
class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    loans = relationship("Loan", back_populates="user")


# Book model
class Book(Base):
    __tablename__ = "books"

    book_id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=False)
    copies = Column(Integer, nullable=False)
    publisher = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    age_rating = Column(
        Enum(AgeRating, values_callable=lambda ratings: [r.value for r in ratings]),
        nullable=False,
    )
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    loans = relationship("Loan", back_populates="book")


# Loan model (the association model)
class Loan(Base):
    __tablename__ = "loans"

    loan_id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    book_id = Column(Integer, ForeignKey("books.book_id"), nullable=False)
    due_date = Column(DateTime, nullable=False)
    renewals = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="loans")
    book = relationship("Book", back_populates="loans")
