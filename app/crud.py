from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError
from app import models, schemas
from app.config import settings
from app.exceptions import AuthError, BusinessRuleError, ConflictError, NotFoundError, ValidationError
from app.security import hash_password, verify_password
from datetime import datetime, timedelta
import logging

logger = logging.getLogger(__name__)

CHECKOUT_REFUSED = "Usuário ou livro inválido, ou livro não disponível"


def create_book(db: Session, book_data: schemas.BookCreate):
    new_book = models.Book(**book_data.model_dump())
    db.add(new_book)
    db.commit()
    db.refresh(new_book)
    logger.info(f"Book {new_book.book_id} added: '{new_book.title}' ({new_book.copies} copies)")
    return new_book


def get_books(db: Session):
    return db.query(models.Book).order_by(models.Book.book_id).all()


def get_book_by_key(db: Session, key: schemas.BookKey):
    # First match wins when several rows share the same descriptive fields
    return (
        db.query(models.Book)
        .filter(
            models.Book.title == key.title,
            models.Book.author == key.author,
            models.Book.publisher == key.publisher,
            models.Book.subject == key.subject,
            models.Book.age_rating == key.age_rating,
        )
        .order_by(models.Book.book_id)
        .first()
    )


def get_user(db: Session, user_id: int):
    return db.get(models.User, user_id)


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def create_user(db: Session, user_data: schemas.UserCreate):
    if get_user_by_email(db, user_data.email):
        raise ConflictError("E-mail já cadastrado")

    try:
        hashed_pw = hash_password(user_data.password)
    except ValueError as exc:
        # passlib refuses passwords over its size limit
        raise ValidationError(f"senha: {exc}")

    new_user = models.User(
        name=user_data.name,
        email=user_data.email,
        hashed_password=hashed_pw
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("E-mail já cadastrado")
    db.refresh(new_user)
    logger.info(f"User {new_user.user_id} registered")
    return new_user


def authenticate_user(db: Session, email: str, password: str):
    user = get_user_by_email(db, email)
    if not user:
        raise AuthError("Credenciais inválidas")
    try:
        valid = verify_password(password, user.hashed_password)
    except ValueError:
        valid = False
    if not valid:
        raise AuthError("Credenciais inválidas")
    return user


def create_loan(db: Session, loan_data: schemas.LoanCreate):
    user = get_user(db, loan_data.user_id)
    book = get_book_by_key(db, loan_data)
    if not user or not book:
        raise BusinessRuleError(CHECKOUT_REFUSED)

    # Conditional decrement, so two checkouts can't both take the last copy
    taken = (
        db.query(models.Book)
        .filter(models.Book.book_id == book.book_id, models.Book.copies > 0)
        .update({models.Book.copies: models.Book.copies - 1}, synchronize_session=False)
    )
    if not taken:
        db.rollback()
        raise BusinessRuleError(CHECKOUT_REFUSED)

    loan = models.Loan(
        user_id=user.user_id,
        book_id=book.book_id,
        due_date=datetime.utcnow() + timedelta(days=settings.loan_days),
        renewals=0
    )
    db.add(loan)
    db.commit()
    db.refresh(loan)

    logger.info(f"Loan {loan.loan_id} created: user {user.user_id}, book {book.book_id}, due {loan.due_date}")
    return loan


def return_loan(db: Session, loan_id: int):
    loan = db.get(models.Loan, loan_id)
    if not loan:
        raise NotFoundError("ID de empréstimo inválido")

    book = db.get(models.Book, loan.book_id)
    if not book:
        logger.warning(f"Loan {loan_id} references missing book {loan.book_id}")
        raise NotFoundError("Livro não encontrado")

    (
        db.query(models.Book)
        .filter(models.Book.book_id == book.book_id)
        .update({models.Book.copies: models.Book.copies + 1}, synchronize_session=False)
    )
    db.delete(loan)
    db.commit()

    logger.info(f"Loan {loan_id} returned: book {book.book_id}")
    return {"mensagem": "Livro devolvido com sucesso"}


def get_loans_by_user(db: Session, user_id: int):
    return (
        db.query(models.Loan)
        .options(joinedload(models.Loan.book))
        .filter(models.Loan.user_id == user_id)
        .order_by(models.Loan.loan_id)
        .all()
    )


def get_loans_with_details(db: Session):
    return (
        db.query(models.Loan)
        .options(joinedload(models.Loan.user), joinedload(models.Loan.book))
        .order_by(models.Loan.loan_id)
        .all()
    )
