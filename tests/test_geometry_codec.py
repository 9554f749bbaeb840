import json

import pytest

from app.domain.codec import (
    POINT_CONSTRUCTOR,
    POLYGON_CONSTRUCTOR,
    decode_geometry,
    encode_geometry,
    geometry_from_store_text,
    geometry_to_wire,
    to_store_literal,
)
from app.domain.geometry import (
    MultiPolygonGeometry,
    PointGeometry,
    PolygonGeometry,
    UnknownGeometry,
)
from app.errors import GeometryDecodeError, UnsupportedGeometryError

SQUARE = ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0))
HOLE = ((2.0, 2.0), (3.0, 2.0), (3.0, 3.0), (2.0, 2.0))


# ============================================================================
# DECODE
# ============================================================================


def test_decode_point_from_bytes():
    """Test a Point document is decoded into a PointGeometry."""
    geometry = decode_geometry(b'{"type":"Point","coordinates":[5.123456,10.123456]}')
    assert geometry == PointGeometry((5.123456, 10.123456))


def test_decode_polygon_from_mapping():
    """Test a Polygon already parsed into a dict is accepted."""
    geometry = decode_geometry(
        {"type": "Polygon", "coordinates": [[[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]]}
    )
    assert isinstance(geometry, PolygonGeometry)
    assert geometry.rings == (SQUARE,)


def test_decode_multipolygon():
    """Test each member polygon keeps its rings and order."""
    raw = json.dumps(
        {
            "type": "MultiPolygon",
            "coordinates": [
                [[list(c) for c in SQUARE]],
                [[list(c) for c in SQUARE], [list(c) for c in HOLE]],
            ],
        }
    )
    geometry = decode_geometry(raw)
    assert geometry == MultiPolygonGeometry(((SQUARE,), (SQUARE, HOLE)))


def test_decode_unknown_type_is_not_an_error():
    """Test an unrecognised type is kept as UnknownGeometry without a payload."""
    geometry = decode_geometry('{"type":"LineString","coordinates":[[0,0],[1,1]]}')
    assert geometry == UnknownGeometry("LineString")


@pytest.mark.parametrize(
    "raw",
    [
        '{"type":"Point","coordinates":[5.1,10.1]',
        "[1, 2]",
        '{"coordinates":[1,2]}',
        '{"type":7,"coordinates":[1,2]}',
        '{"type":"Point","coordinates":[1]}',
        '{"type":"Point","coordinates":["a","b"]}',
        '{"type":"Point"}',
        '{"type":"Polygon","coordinates":[[1,2]]}',
    ],
)
def test_decode_malformed_input_raises(raw):
    """Test malformed documents raise GeometryDecodeError."""
    with pytest.raises(GeometryDecodeError):
        decode_geometry(raw)


# ============================================================================
# ENCODE
# ============================================================================


def test_encode_point_matches_wire_format():
    """Test a point encodes to the compact wire document."""
    encoded = encode_geometry(PointGeometry((5.123456, 10.123456)))
    assert encoded == b'{"type":"Point","coordinates":[5.123456,10.123456]}'


def test_encode_unknown_geometry_has_null_coordinates():
    """Test an unknown kind encodes its type name with null coordinates."""
    assert geometry_to_wire(UnknownGeometry("LineString")) == {
        "type": "LineString",
        "coordinates": None,
    }


def test_encode_multipolygon():
    wire = geometry_to_wire(MultiPolygonGeometry(((SQUARE,),)))
    assert wire["type"] == "MultiPolygon"
    assert wire["coordinates"] == [[[list(c) for c in SQUARE]]]


@pytest.mark.parametrize(
    "geometry",
    [
        PointGeometry((-180.0, 90.0)),
        PolygonGeometry((SQUARE,)),
        PolygonGeometry((SQUARE, HOLE)),
    ],
)
def test_decode_inverts_encode(geometry):
    """Test decoding an encoded geometry gives back an equal value."""
    assert decode_geometry(encode_geometry(geometry)) == geometry


# ============================================================================
# STORE LITERALS
# ============================================================================


def test_point_store_literal():
    """Test a point renders as POINT WKT for ST_PointFromText."""
    literal = to_store_literal(PointGeometry((5.123456, 10.0)))
    assert literal.constructor == POINT_CONSTRUCTOR
    assert literal.text == "POINT(5.123456 10)"


def test_polygon_store_literal():
    """Test every ring is rendered in order inside one POLYGON literal."""
    literal = to_store_literal(PolygonGeometry((SQUARE, HOLE)))
    assert literal.constructor == POLYGON_CONSTRUCTOR
    assert literal.text == (
        "POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,3 2,3 3,2 2))"
    )


def test_store_literal_keeps_fractional_precision():
    literal = to_store_literal(PointGeometry((-0.1, 51.477928)))
    assert literal.text == "POINT(-0.1 51.477928)"


@pytest.mark.parametrize(
    "geometry",
    [MultiPolygonGeometry(((SQUARE,),)), UnknownGeometry("LineString"), UnknownGeometry()],
)
def test_store_literal_rejects_unstorable_geometry(geometry):
    """Test kinds without a column raise instead of producing an empty literal."""
    with pytest.raises(UnsupportedGeometryError):
        to_store_literal(geometry)


@pytest.mark.parametrize("raw", [None, "", b""])
def test_empty_store_text_gives_zero_geometry(raw):
    """Test a missing geometry in a store row gives the zero value."""
    assert geometry_from_store_text(raw) == UnknownGeometry()


def test_store_text_is_decoded_as_geojson():
    raw = '{"type":"Polygon","coordinates":[]}'
    assert geometry_from_store_text(raw) == PolygonGeometry(())
