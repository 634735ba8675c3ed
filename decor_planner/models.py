from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .styles import style_palette

RoomTypeTag = Literal[
    "living room",
    "bedroom",
    "master bedroom",
    "kitchen",
    "bathroom",
    "entrance",
    "dining room",
    "office",
]
ROOM_TYPE_TAGS: Tuple[str, ...] = RoomTypeTag.__args__

Layer = Literal["furniture", "decor"]
LAYERS: Tuple[str, ...] = Layer.__args__

SizeMode = Literal["relative", "radial", "fixed"]
ColorSource = Literal["accent", "wood", "fixed"]
Rotation = Literal[0, 90, 180, -90]


class Point2D(BaseModel):
    x: float
    y: float


class RoomDescriptor(BaseModel):
    name: str
    width: float
    depth: float
    height: float = 3.0
    # world-space footprint center; y is vertical
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    fill_color: str = "#93c5fd"


class DesignConfiguration(BaseModel):
    style: str = "modern"
    color_palette: List[str] = Field(
        default_factory=lambda: style_palette("modern")
    )
    furniture_enabled: bool = True
    decor_enabled: bool = True
    lighting_style: str = "natural"


class PlacementRule(BaseModel):
    item_kind: str
    offset: Tuple[float, float] = (0.0, 0.0)
    size: Tuple[float, float]
    size_mode: SizeMode = "relative"
    rotation: Rotation = 0
    color_source: ColorSource = "fixed"
    color: Optional[str] = None
    label: Optional[str] = None

    @model_validator(mode="after")
    def _fixed_color_present(self) -> "PlacementRule":
        if self.color_source == "fixed" and not self.color:
            raise ValueError(f"rule '{self.item_kind}' uses a fixed color but none was given")
        return self

    @property
    def slot(self) -> str:
        return self.label or self.item_kind


class PlacedItem(BaseModel):
    id: str
    item_kind: str
    layer: Layer
    room: str
    center: Point2D
    width: float
    height: float
    radius: Optional[float] = None
    rotation: float = 0.0
    color: str


class PlanLayout(BaseModel):
    plot_width: Optional[float] = None
    plot_depth: Optional[float] = None
    rooms: List[RoomDescriptor] = Field(default_factory=list)
    furniture: List[PlacedItem] = Field(default_factory=list)
    decor: List[PlacedItem] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# HTTP payloads (validated at the edge; the core itself trusts its inputs)
# ---------------------------------------------------------------------------
HEX_COLOR = r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"
MAX_PLOT_SIZE = 1000.0  # meters

HexColor = Annotated[str, Field(pattern=HEX_COLOR)]


class RoomPayload(RoomDescriptor):
    width: float = Field(gt=0)
    depth: float = Field(gt=0)
    height: float = Field(3.0, gt=0)
    fill_color: HexColor = "#93c5fd"


class DesignPayload(DesignConfiguration):
    color_palette: List[HexColor] = Field(
        default_factory=lambda: style_palette("modern"),
        min_length=1,
    )


class LayoutRequest(BaseModel):
    room: RoomPayload
    design: DesignPayload = Field(default_factory=DesignPayload)
    layer: Layer = "furniture"
    room_index: int = Field(0, ge=0)


class PlanRequest(BaseModel):
    rooms: List[RoomPayload]
    design: DesignPayload = Field(default_factory=DesignPayload)
    plot_width: Optional[float] = Field(None, gt=0, le=MAX_PLOT_SIZE)
    plot_depth: Optional[float] = Field(None, gt=0, le=MAX_PLOT_SIZE)
    frame: Literal["room", "plot"] = "plot"


class RenderRequest(PlanRequest):
    show_furniture: bool = True
    show_decor: bool = True


class RotateRequest(BaseModel):
    item: PlacedItem
    step: float = 45.0


class MoveRequest(BaseModel):
    item: PlacedItem
    x: float
    y: float
