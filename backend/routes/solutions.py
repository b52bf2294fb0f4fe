# backend/routes/solutions.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_db
from models.solution import Solution
from models.users import User
from schemas.catalog import SolutionCreate, SolutionOut, SolutionUpdate
from utils import analytics
from utils.crud import create_item, delete_item, get_or_404, list_newest_first, update_item
from utils.session_auth import admin_required

router = APIRouter(prefix="/api/solutions", tags=["Solutions"])


@router.get("", response_model=List[SolutionOut])
def list_solutions(db: Session = Depends(get_db)):
    return list_newest_first(db, Solution)


# Fetch one solution; also counted as a service click
@router.get("/{solution_id}", response_model=SolutionOut)
def get_solution(solution_id: int, db: Session = Depends(get_db)):
    solution = get_or_404(db, Solution, solution_id, "Solution")
    result = SolutionOut.model_validate(solution)
    analytics.track(db, analytics.SERVICE_CLICKS)
    return result


@router.post("", response_model=SolutionOut, status_code=status.HTTP_201_CREATED)
def create_solution(
    payload: SolutionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    return create_item(db, Solution, payload)


@router.put("/{solution_id}", response_model=SolutionOut)
def update_solution(
    solution_id: int,
    payload: SolutionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    solution = get_or_404(db, Solution, solution_id, "Solution")
    return update_item(db, solution, payload)


@router.delete("/{solution_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_solution(
    solution_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(admin_required),
):
    delete_item(db, get_or_404(db, Solution, solution_id, "Solution"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
