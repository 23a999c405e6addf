import logging

from fastapi import FastAPI

from hoarding_booking.api.v1.availability import router as availability_router
from hoarding_booking.api.v1.pricing import router as pricing_router
from hoarding_booking.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("item_id", "reason", "day", "start", "end", "months", "count", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title="Hoarding Booking Engine", version="1.0.0")

app.include_router(pricing_router, prefix="/v1", tags=["pricing"])
app.include_router(availability_router, prefix="/v1", tags=["availability"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
