from fastapi import APIRouter

from board_server.routers.pages import router as pages_router
from board_server.routers.replies import router as replies_router
from board_server.routers.threads import router as threads_router

router = APIRouter()
router.include_router(threads_router)
router.include_router(replies_router)
router.include_router(pages_router)
