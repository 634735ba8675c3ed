from __future__ import annotations

import os
import time
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from fastapi.routing import APIRoute

# ---- project imports ----
from .classifier import classify
from .defaults import DEFAULT_PLOT
from .evaluator import evaluate, evaluate_plan
from .heuristics import compute_penalties, move_item, rotate_item
from .models import (
    LAYERS, ROOM_TYPE_TAGS, LayoutRequest, MoveRequest, PlacedItem, PlanRequest, RenderRequest,
    RotateRequest,
)
from .render.schematic import schematic_png
from .render.svg import render_plan_svg
from .rules.table import rules_for
from .styles import styles_with_palettes
from .telemetry import log_event as record_event

CORS_ORIGINS = os.getenv(
    "PLANNER_CORS_ORIGINS",
    "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000,http://127.0.0.1:3000",
).split(",")

# -----------------------------------------------------------------------------
# FastAPI app
# -----------------------------------------------------------------------------
app = FastAPI(title="Room Decor Planner Backend",
              version="1.0.0 (rule-table layouts)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def log_event(event: Dict[str, Any]) -> None:
    event.setdefault("ts", time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()))
    print(f"[event] {event}")
    record_event(dict(event))

def _plot_of(req: PlanRequest):
    return (req.plot_width or DEFAULT_PLOT[0], req.plot_depth or DEFAULT_PLOT[1])

# -----------------------------------------------------------------------------
# Diagnostics
# -----------------------------------------------------------------------------
@app.get("/")
def root():
    return {"ok": True, "service": "decor-planner-backend", "mode": "rule-table"}

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/routes")
def list_routes():
    """Quick route lister to debug 404s."""
    return [
        {"path": r.path, "methods": sorted(list(r.methods or [])), "name": r.name}
        for r in app.routes
        if isinstance(r, APIRoute)
    ]

# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------
@app.get("/styles")
def list_styles():
    return styles_with_palettes()

@app.get("/classify")
def classify_room(name: str = ""):
    return {"name": name, "room_type": classify(name)}

@app.get("/rules/{room_type}/{layer}")
def list_rules(room_type: str, layer: str):
    if room_type not in ROOM_TYPE_TAGS:
        raise HTTPException(status_code=404, detail=f"Unknown room type '{room_type}'")
    if layer not in LAYERS:
        raise HTTPException(status_code=400, detail=f"Layer must be one of {list(LAYERS)}")
    return [r.model_dump() for r in rules_for(room_type, layer)]

# -----------------------------------------------------------------------------
# Layout evaluation
# -----------------------------------------------------------------------------
@app.post("/layout", response_model=List[PlacedItem])
def layout_room(req: LayoutRequest):
    """Items for one room and layer, centered on the room's projected center."""
    items = evaluate(req.room, req.design, req.layer, room_index=req.room_index)
    log_event({
        "event": "layout",
        "room": req.room.name,
        "room_type": classify(req.room.name),
        "layer": req.layer,
        "items": len(items),
    })
    return items

@app.post("/plan")
def layout_plan(req: PlanRequest):
    """
    Furniture and decor for every room. frame="plot" anchors items on the
    shared plot canvas; frame="room" keeps each room's own center frame.
    """
    plot = _plot_of(req)
    anchor = plot if req.frame == "plot" else None
    layout = evaluate_plan(req.rooms, req.design, plot=anchor)

    penalties = {}
    for idx, room in enumerate(req.rooms):
        prefix = f"{idx}-"
        items = [it for it in layout.furniture if it.id.startswith(prefix)]
        penalties[room.name] = compute_penalties(room, items, anchor)

    log_event({
        "event": "plan",
        "rooms": len(req.rooms),
        "frame": req.frame,
        "furniture": len(layout.furniture),
        "decor": len(layout.decor),
    })
    return {
        "status": "ok",
        "layout": layout.model_dump(),
        "penalties": penalties,
    }

# -----------------------------------------------------------------------------
# Editing (drag / double-click rotate in the top-down view)
# -----------------------------------------------------------------------------
@app.post("/items/rotate", response_model=PlacedItem)
def rotate(req: RotateRequest):
    return rotate_item(req.item, req.step)

@app.post("/items/move", response_model=PlacedItem)
def move(req: MoveRequest):
    return move_item(req.item, req.x, req.y)

# -----------------------------------------------------------------------------
# Rendering
# -----------------------------------------------------------------------------
@app.post("/render/svg")
def render_svg(req: RenderRequest):
    pw, pd = _plot_of(req)
    svg = render_plan_svg(req.rooms, req.design, pw, pd,
                          show_furniture=req.show_furniture, show_decor=req.show_decor)
    log_event({"event": "render", "format": "svg", "rooms": len(req.rooms)})
    return Response(content=svg, media_type="image/svg+xml")

@app.post("/render/schematic")
def render_schematic(req: PlanRequest,
                     width: int = Query(800, ge=100, le=4000),
                     height: int = Query(600, ge=100, le=4000)):
    pw, pd = _plot_of(req)
    png = schematic_png(req.rooms, pw, pd, size=(width, height))
    log_event({"event": "render", "format": "png", "rooms": len(req.rooms)})
    return Response(content=png, media_type="image/png")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app,
                host=os.getenv("HOST", "127.0.0.1"),
                port=int(os.getenv("PORT", "8000")))
