from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .routes import router
from .models import PostStore
from .crud import PostNotFound
from .core import init_metrics
from . import config
import logging
from pythonjsonlogger import jsonlogger

# setup structured logging
logger = logging.getLogger('blogapi')
handler = logging.StreamHandler()
formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(config.LOG_LEVEL)

app = FastAPI(title="Blog Posts API", version="1.0.0")
app.state.store = PostStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(router)

@app.get('/healthz')
async def healthz():
    return {'status': 'ok'}

@app.exception_handler(PostNotFound)
async def post_not_found(request: Request, exc: PostNotFound):
    logger.warning({'msg': 'post_not_found', 'post_id': exc.post_id, 'method': request.method})
    return JSONResponse(status_code=404, content={'message': 'Post not found'})

@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    logger.info({'msg': 'invalid_request', 'path': request.url.path})
    return JSONResponse(
        status_code=400,
        content={'message': 'Invalid request', 'errors': jsonable_encoder(exc.errors())},
    )

@app.middleware('http')
async def log_requests(request: Request, call_next):
    logger.info({'msg':'request_start','method':request.method,'path':request.url.path})
    response = await call_next(request)
    logger.info({'msg':'request_end','status': response.status_code})
    return response

@app.on_event("startup")
async def startup():
    # init_metrics is best-effort and logs its own failures
    if config.METRICS_ENABLED:
        init_metrics(config.METRICS_PORT)
    logger.info({'msg': 'startup', 'port': config.PORT})
