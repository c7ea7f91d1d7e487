from fastapi import APIRouter

from app.api.routes import aptitude_tests
from app.api.routes import attempts
from app.api.routes import interviews
from app.api.routes import questions
from app.api.routes import system
from app.api.routes import users

api_router = APIRouter()
api_router.include_router(aptitude_tests.router)
api_router.include_router(attempts.router)
api_router.include_router(questions.router)
api_router.include_router(interviews.router)
api_router.include_router(users.router)
api_router.include_router(system.router)
