import uvicorn

from voice_terminal.config.settings import settings


def main(argv: list[str] | None = None) -> int:
    # Run FastAPI app from voice_terminal.main:app
    uvicorn.run(
        "voice_terminal.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )  # type: ignore[arg-type]
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
