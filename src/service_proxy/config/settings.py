import os


class Settings:
    class Server:
        SCHEME = os.environ.get("SERVICE_PROXY_SCHEME", "https")
        HOST = os.environ.get("SERVICE_PROXY_HOST", "localhost")
        # seconds; applied by the httpx client, the proxy has no own timeout
        TIMEOUT = float(os.environ.get("SERVICE_PROXY_TIMEOUT", "5"))

    class System:
        LOGGER_NAME = "service_proxy"
        LOG_LEVEL = os.environ.get("SERVICE_PROXY_LOG_LEVEL", "INFO")
