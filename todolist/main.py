import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager

from .config import Settings, settings as default_settings
from .exceptions import TaskNotFoundError, TaskValidationError
from .storage.task_store import TaskStore
from .api import tasks

# 配置日志
logging.basicConfig(
    level=default_settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the To-Do List API!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时初始化
    cfg: Settings = app.state.settings
    logger.info(f"🚀 {cfg.app_name} 启动")
    logger.info(f"📡 Server is running on http://{cfg.host}:{cfg.port}")
    logger.info(f"🔒 原子更新: {cfg.atomic_updates}")
    yield
    # 关闭时清理
    logger.info(f"👋 {cfg.app_name} 关闭, 丢弃 {len(app.state.task_store)} 个任务")


async def validation_error_handler(request: Request, exc: TaskValidationError):
    logger.warning(f"请求校验失败: {request.method} {request.url.path}, 字段: {exc.field}, 错误: {exc.message}")
    return JSONResponse(status_code=400, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"请求体解析失败: {request.method} {request.url.path}, 错误: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})


async def not_found_handler(request: Request, exc: TaskNotFoundError):
    logger.warning(f"任务不存在: {exc.task_id}")
    return JSONResponse(status_code=404, content={"error": exc.message})


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"请求处理失败: {request.method} {request.url.path}, 错误: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong!"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """创建应用实例，每个实例持有独立的任务存储"""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="内存任务清单服务，支持任务的创建、查询、更新和删除",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.task_store = TaskStore(atomic_updates=settings.atomic_updates)

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 异常处理
    app.add_exception_handler(TaskValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(TaskNotFoundError, not_found_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # 路由注册
    app.include_router(tasks.router)

    @app.get("/", summary="欢迎信息", tags=["系统"], response_class=PlainTextResponse)
    async def root():
        """获取欢迎信息"""
        return WELCOME_MESSAGE

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "todolist.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.reload,
    )
