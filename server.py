from __future__ import annotations

import os

import uvicorn


if __name__ == "__main__":
    host = os.getenv("GAME_HOST", "127.0.0.1")
    port = int(os.getenv("GAME_PORT", os.getenv("PORT", "8080")))
    uvicorn.run("src.game.main:app", host=host, port=port, reload=os.getenv("GAME_RELOAD", "0") == "1")
