from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from app.models import AgeRating

# Attribute names mirror the ORM columns; aliases are the JSON field names.


class UserBase(BaseModel):
    name: str = Field(alias="nome")
    email: str

    model_config = {
        "populate_by_name": True
    }


class UserCreate(UserBase):
    password: str = Field(alias="senha")


class UserLogin(BaseModel):
    email: str
    password: str = Field(alias="senha")

    model_config = {
        "populate_by_name": True
    }


class UserConfig(UserBase):
    user_id: int = Field(alias="id")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {
        "from_attributes": True
    }


class UserSummary(UserBase):
    model_config = {
        "from_attributes": True
    }


class BookKey(BaseModel):
    """The descriptive fields that identify a book for checkout."""
    title: str = Field(alias="titulo")
    author: str = Field(alias="autor")
    publisher: str = Field(alias="editora")
    subject: str = Field(alias="assunto")
    age_rating: AgeRating = Field(alias="faixaEtaria")

    model_config = {
        "populate_by_name": True
    }


class BookCreate(BookKey):
    copies: int = Field(alias="quantidade", ge=0)


class BookConfig(BookCreate):
    book_id: int = Field(alias="id")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {
        "from_attributes": True
    }


class BookSummary(BaseModel):
    title: str = Field(alias="titulo")
    author: str = Field(alias="autor")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True
    }


class LoanCreate(BookKey):
    user_id: int = Field(alias="usuarioId")


class LoanReturn(BaseModel):
    loan_id: int = Field(alias="emprestimoId")

    model_config = {
        "populate_by_name": True
    }


class LoanConfig(BaseModel):
    loan_id: int = Field(alias="id")
    user_id: int = Field(alias="usuarioId")
    book_id: int = Field(alias="livroId")
    due_date: datetime = Field(alias="dataVencimento")
    renewals: int = Field(alias="renovacoes")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True
    }


class LoanWithBook(LoanConfig):
    book: Optional[BookConfig] = Field(default=None, alias="livro")


class LoanWithBookUser(LoanConfig):
    user: Optional[UserSummary] = Field(default=None, alias="usuario")
    book: Optional[BookSummary] = Field(default=None, alias="livro")


class Message(BaseModel):
    mensagem: str
