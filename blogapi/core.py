from prometheus_client import Counter, Gauge, start_http_server
import logging

logger = logging.getLogger(__name__)

POST_OPERATIONS = Counter(
    'blogapi_post_operations_total',
    'Post store operations served',
    ['operation'],
)
POSTS_HELD = Gauge('blogapi_posts', 'Number of posts currently held in memory')

def init_metrics(port: int = 8001):
    """Initialize Prometheus metrics server"""
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except Exception as e:
        logger.warning(f'Prometheus start failed: {e}')

def record_operation(operation: str, posts_held: int):
    POST_OPERATIONS.labels(operation=operation).inc()
    POSTS_HELD.set(posts_held)
