from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app import schemas, crud
from typing import List
from app.database import get_db

router = APIRouter()


@router.post("/livros", response_model=schemas.BookConfig, status_code=status.HTTP_201_CREATED)
def create_book(book: schemas.BookCreate, db: Session = Depends(get_db)):
    return crud.create_book(db, book)


@router.get("/livros", response_model=List[schemas.BookConfig])
def read_all_books(db: Session = Depends(get_db)):
    return crud.get_books(db)


@router.post("/registrar", response_model=schemas.UserConfig, status_code=status.HTTP_201_CREATED)
def register_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    return crud.create_user(db, user)


@router.post("/login", response_model=schemas.UserConfig)
def login(credentials: schemas.UserLogin, db: Session = Depends(get_db)):
    return crud.authenticate_user(db, credentials.email, credentials.password)


@router.post("/alugar", response_model=schemas.LoanConfig, status_code=status.HTTP_201_CREATED)
def borrow_book(loan: schemas.LoanCreate, db: Session = Depends(get_db)):
    return crud.create_loan(db, loan)


@router.delete("/devolver", response_model=schemas.Message)
def return_book(return_data: schemas.LoanReturn, db: Session = Depends(get_db)):
    return crud.return_loan(db, return_data.loan_id)


# Renewal is a fresh checkout; the stored renewal count is left untouched
@router.post("/renovar", response_model=schemas.LoanConfig, status_code=status.HTTP_201_CREATED)
def renew_loan(loan: schemas.LoanCreate, db: Session = Depends(get_db)):
    return crud.create_loan(db, loan)


@router.get("/usuario/{user_id}/emprestimos", response_model=List[schemas.LoanWithBook])
def get_user_loans(user_id: int, db: Session = Depends(get_db)):
    return crud.get_loans_by_user(db, user_id)


@router.get("/livros-alugados", response_model=List[schemas.LoanWithBookUser])
def get_rented_books(db: Session = Depends(get_db)):
    return crud.get_loans_with_details(db)
