from __future__ import annotations

import sys

import uvicorn

from ticket_service.adapters.inbound.cli import run_cli
from ticket_service.bootstrap import build_ticket_service
from ticket_service.config import Settings


def main(argv: list[str] | None = None) -> int:
    argv = argv or sys.argv[1:]
    if not argv:
        print("usage: python -m ticket_service.main '<json>'")
        return 2

    svc = build_ticket_service()
    return run_cli(svc, argv[0])


def serve() -> None:
    settings = Settings()
    uvicorn.run(
        "ticket_service.bootstrap:create_asgi_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())
