"""
Entry point for the spread dashboard.

Usage:
    python -m spreadwatch
    spreadwatch  # if installed via pip
"""

import sys


# Try to use uvloop for better performance
try:
    import uvloop  # noqa: F401

    UVLOOP_ENABLED = True
except ImportError:
    UVLOOP_ENABLED = False


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success).
    """
    import uvicorn
    from pydantic import ValidationError

    from spreadwatch import __version__
    from spreadwatch.config.constants import EXCHANGES
    from spreadwatch.config.settings import get_settings
    from spreadwatch.telemetry.logger import setup_logging

    print(
        f"""
╔═══════════════════════════════════════════════════════════════╗
║     SPREADWATCH v{__version__:<45}║
║                                                               ║
║     MEXC futures spread monitor                               ║
╚═══════════════════════════════════════════════════════════════╝
    """
    )

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}")
        print("\nCheck the environment (or .env file), for example:")
        print("  SECRET_TOKEN=your_token")
        print("  RAM_LIMIT=512Mi")
        return 1

    secret = settings.secret_token.get_secret_value()
    print("Configuration:")
    print(f"  Listen:         http://{settings.host}:{settings.port}")
    print(f"  Secret token:   {secret[:2]}{'*' * max(len(secret) - 2, 0)}")
    print(f"  Exchanges:      {', '.join(EXCHANGES)}")
    print(f"  MEXC keys:      {'Configured' if settings.has_credentials else 'Missing (deposits fail open)'}")
    print(f"  Poll interval:  {settings.poll_interval_ms} ms")
    print(f"  Limits:         {settings.cpu_cores:g} CPU / {settings.ram_limit} RAM")
    print(f"  Pod:            {settings.pod_ip}")
    print(f"  uvloop:         {'Enabled' if UVLOOP_ENABLED else 'Disabled'}")
    print()

    async_logger = setup_logging(settings.log_level)
    async_logger.info(f"Dashboard: http://localhost:{settings.port}/?token=<token>&symbol=BTC")

    try:
        uvicorn.run(
            "spreadwatch.dashboard.server:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            loop="uvloop" if UVLOOP_ENABLED else "asyncio",
            log_level="warning",
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        async_logger.stop()

    return 0


if __name__ == "__main__":
    sys.exit(main())
