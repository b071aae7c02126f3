"""Weather widget dashboard — FastAPI backend serving the widget and its state."""

import threading
from datetime import UTC, datetime
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from widget.config.defaults import DEFAULT_CONFIG_PATH, EMPTY_CITY_ALERT
from widget.config.loader import load_config
from widget.controller import WeatherController
from widget.models.weather import IconAsset
from widget.reporting.renderer import render_dict

ROOT_DIR = Path(__file__).parent.parent
CONFIG_PATH = ROOT_DIR / DEFAULT_CONFIG_PATH
STATIC_DIR = ROOT_DIR / "static"
WIDGET_HTML = STATIC_DIR / "widget.html"

app = FastAPI(title="Weather Widget", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_controller: WeatherController | None = None
_controller_lock = threading.Lock()


def set_controller(controller: WeatherController) -> None:
    global _controller
    with _controller_lock:
        _controller = controller


def get_controller() -> WeatherController:
    """Lazily build the shared controller and run the initial load."""
    global _controller
    if _controller is None:
        with _controller_lock:
            if _controller is None:
                controller = WeatherController.from_config(load_config(CONFIG_PATH))
                controller.start()
                _controller = controller
    return _controller


class SearchRequest(BaseModel):
    city: str


# ── Widget endpoints ────────────────────────────────────────────


@app.get("/api/state")
def get_state(controller: WeatherController = Depends(get_controller)):
    """Current render mode and the payload for that mode."""
    return render_dict(controller.snapshot())


@app.post("/api/search")
def search(
    request: SearchRequest,
    controller: WeatherController = Depends(get_controller),
):
    if not request.city.strip():
        raise HTTPException(422, EMPTY_CITY_ALERT)
    controller.search(request.city)
    return render_dict(controller.snapshot())


@app.post("/api/toggle-unit")
def toggle_unit(controller: WeatherController = Depends(get_controller)):
    """Switch units; the controller re-fetches the last city."""
    controller.toggle_unit()
    return render_dict(controller.snapshot())


@app.get("/api/health")
def get_health():
    return {
        "status": "ok",
        "controller_ready": _controller is not None,
        "timestamp": datetime.now(UTC).isoformat(),
    }


# ── Serve widget ────────────────────────────────────────────────


@app.get("/assets/{filename}")
def get_asset(filename: str):
    names = {f"{icon.value}.svg" for icon in IconAsset}
    path = STATIC_DIR / "assets" / filename
    if filename not in names or not path.exists():
        raise HTTPException(404, "Asset not found")
    return FileResponse(path, media_type="image/svg+xml")


@app.get("/")
def serve_widget():
    if WIDGET_HTML.exists():
        return FileResponse(WIDGET_HTML, media_type="text/html")
    return HTMLResponse("<h1>Widget not found</h1>", status_code=404)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8777)
