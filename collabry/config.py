
from config import settings

SECRET = settings.secret


class Config:
    access_token_lifetime = 60 * 10
    refresh_token_lifetime = 3600 * 24 * 30
    ip_buffer = 10
    ip_buffer_lifetime = 60 * 60 * 24
    algorithm = "HS256"
    min_password_length = 8
    websocket_polling_interval = 1
    websocket_redis_message_lifetime = 60 * 10
