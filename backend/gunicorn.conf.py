# Bind & workers
bind = "0.0.0.0:8080"
# The datastore lock is process-local: one worker, concurrency through threads.
workers = 1
worker_class = "gthread"
threads = 8
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False

wsgi_app = "chirpy:create_app()"
