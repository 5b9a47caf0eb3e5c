import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    # Sessions live in process memory, so extra workers would not share them.
    workers = int(os.environ.get("WEB_CONCURRENCY", 1))
    uvicorn.run(
        "paint_analyzer.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
    )
