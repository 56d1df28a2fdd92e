import logging
import os
import traceback
from datetime import datetime
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from config import settings
from database import engine, Base
from crud.api.v1.endpoints import assistant, clients, dashboard, financial, inventory, producers, tasks
import models  # noqa: F401  registers every table on Base.metadata

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Farm Dashboard API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def exception_handling(request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        logger.error("error processing %s %s: %s\n%s", request.method, request.url.path, e, traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={"detail": f"Internal server error occurred: {str(e)}"}
        )

Base.metadata.create_all(bind=engine)


app.include_router(producers.router, prefix="/api/v1/producers", tags=["producers"])
app.include_router(inventory.router, prefix="/api/v1/inventory", tags=["inventory"])
app.include_router(financial.router, prefix="/api/v1/financial", tags=["financial"])
app.include_router(clients.router, prefix="/api/v1/clients", tags=["clients"])
app.include_router(tasks.router, prefix="/api/v1/tasks", tags=["tasks"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["dashboard"])
app.include_router(assistant.router, prefix="/api/v1/assistant", tags=["assistant"])


@app.get("/health", tags=["system"])
def health_check():
    return {"status": "ok", "timestamp": datetime.now().isoformat()}

if __name__ == '__main__':
    port = int(os.environ.get("PORT", 8000))

    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
