import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
wsgi_app = "app:app"

# Low, safe defaults for small containers; override via env if needed
workers = int(os.getenv("WEB_CONCURRENCY", "2"))
threads = int(os.getenv("WEB_THREADS", "2"))
worker_class = os.getenv("WORKER_CLASS", "gthread")
preload_app = False

# Photos arrive inline in the form post, so allow slow uploads.
timeout = int(os.getenv("WEB_TIMEOUT", "60"))
keepalive = 2
max_requests = int(os.getenv("MAX_REQUESTS", "500"))
max_requests_jitter = int(os.getenv("MAX_REQUESTS_JITTER", "50"))

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
