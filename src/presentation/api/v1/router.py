from fastapi import APIRouter

from .loan import loan_router

router = APIRouter()

router.include_router(loan_router, tags=["Loans"])
