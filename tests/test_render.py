import io
import xml.etree.ElementTree as ET

from PIL import Image

from decor_planner.render.schematic import render_schematic, schematic_png
from decor_planner.models import RoomDescriptor
from decor_planner.render.svg import SHAPES, render_plan_svg

SVG_NS = "{http://www.w3.org/2000/svg}"


def _groups(root, cls):
    return [g for g in root.iter(f"{SVG_NS}g") if g.get("class") == cls]


def test_svg_is_well_formed_and_layered(rooms, design):
    svg = render_plan_svg(rooms, design, 20, 16)
    root = ET.fromstring(svg)
    assert root.get("viewBox") == "-2 -2 24 20"

    decor, = _groups(root, "decor-layer")
    furniture, = _groups(root, "furniture-layer")
    children = list(root)
    assert children.index(decor) < children.index(furniture)
    assert len(list(furniture)) > 0
    assert "Master Bedroom" in svg


def test_svg_layers_can_be_hidden(rooms, design):
    root = ET.fromstring(render_plan_svg(rooms, design, 20, 16, show_furniture=False, show_decor=False))
    assert _groups(root, "furniture-layer") == []
    assert _groups(root, "decor-layer") == []


def test_every_authored_kind_has_a_shape(rooms, design):
    from decor_planner.rules.table import registered_pairs, rules_for
    kinds = {r.item_kind for pair in registered_pairs() for r in rules_for(*pair)}
    assert kinds <= set(SHAPES)


def test_schematic_png(rooms):
    data = schematic_png(rooms, 20, 16, size=(400, 300))
    img = Image.open(io.BytesIO(data))
    assert img.format == "PNG"
    assert img.size == (400, 300)


def test_schematic_paints_room_tint(rooms):
    img = render_schematic(rooms, 20, 16, size=(800, 640))
    # the plot is letterboxed to fit; sample inside the living room, off the grid lines
    scale = min((800 - 80) / 20, (640 - 80) / 16)
    off_x = (800 - 20 * scale) / 2
    off_y = (640 - 16 * scale) / 2
    px = img.getpixel((int(off_x + 7.5 * scale), int(off_y + 8 * scale + 50)))
    assert px != (0x1a, 0x1f, 0x2e)


def test_svg_escapes_colour_attributes(design):
    hostile = RoomDescriptor(name="Kitchen", width=4, depth=4, fill_color='#fff" onload="alert(1)')
    cfg = design.model_copy(update={"color_palette": ["#000", "#111", '"/><script>alert(1)</script><x y="']})
    svg = render_plan_svg([hostile], cfg, 20, 16)
    root = ET.fromstring(svg)
    assert "<script>" not in svg
    assert all(el.get("onload") is None for el in root.iter())


def test_schematic_thins_grid_on_large_plot(rooms):
    img = render_schematic(rooms, 1000, 1000, size=(200, 200))
    assert img.size == (200, 200)
