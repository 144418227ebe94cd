from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

import msgspec
import pytest

from musicbrainz_api_client import (
    Area,
    Artist,
    ArtistApi,
    CoverArtURL,
    Recording,
    RecordingApi,
    Relation,
    RelationURL,
    Release,
)

if TYPE_CHECKING:
    from conftest import MakeApiClient


class NullFieldTestCase(NamedTuple):
    body: str
    target_type: type[msgspec.Struct]
    expected: msgspec.Struct


@pytest.mark.parametrize(
    argnames="test_case",
    argvalues=[
        NullFieldTestCase(
            body='{"id": "a", "aliases": null}',
            target_type=Artist,
            expected=Artist(id="a"),
        ),
        NullFieldTestCase(
            body='{"id": "a", "tags": null, "relations": null, "area": null}',
            target_type=Artist,
            expected=Artist(id="a"),
        ),
        NullFieldTestCase(
            body='{"id": "r", "tags": null, "artist-credit": null}',
            target_type=Recording,
            expected=Recording(id="r"),
        ),
        NullFieldTestCase(
            body='{"cover-art-archive": {"count": null, "front": null, "images": null}}',
            target_type=Release,
            expected=Release(cover_art_archive=CoverArtURL()),
        ),
    ],
)
def test_null_decodes_to_zero_value(test_case: NullFieldTestCase) -> None:
    decoded = msgspec.json.decode(test_case.body, type=test_case.target_type)
    assert decoded == test_case.expected


def test_null_cover_art_fields_are_zero() -> None:
    cover_art = msgspec.json.decode(
        '{"artwork": null, "front": null, "back": null, "count": null}',
        type=CoverArtURL,
    )
    assert cover_art.artwork is False
    assert cover_art.front is False
    assert cover_art.back is False
    assert cover_art.count == 0
    assert cover_art.images == ()


def test_null_envelope_decodes_to_empty_tuple(
    make_api_client: MakeApiClient,
) -> None:
    client, _ = make_api_client('{"count": 0, "recordings": null}')
    assert RecordingApi(api_client=client).search_recordings("x", 5) == ()


def test_null_aliases_through_lookup(make_api_client: MakeApiClient) -> None:
    client, _ = make_api_client('{"id": "a", "aliases": null, "tags": null}')
    artist = ArtistApi(api_client=client).get_artist_by_id("a")
    assert artist.aliases == ()
    assert artist.tags == ()


class ValueShapeTestCase(NamedTuple):
    body: str
    target_type: type[msgspec.Struct]
    expected: msgspec.Struct


@pytest.mark.parametrize(
    argnames="test_case",
    argvalues=[
        ValueShapeTestCase(
            body='{"area": "GB"}',
            target_type=Artist,
            expected=Artist(area="GB"),
        ),
        ValueShapeTestCase(
            body='{"area": {"id": "8a75", "name": "United Kingdom"}}',
            target_type=Artist,
            expected=Artist(area=Area(id="8a75", name="United Kingdom")),
        ),
        ValueShapeTestCase(
            body='{"relations": [{"type": "discogs", "url": "https://x"}]}',
            target_type=Artist,
            expected=Artist(
                relations=(Relation(type="discogs", url="https://x"),)
            ),
        ),
        ValueShapeTestCase(
            body='{"relations": [{"url": {"resource": "https://x"}}]}',
            target_type=Release,
            expected=Release(
                relations=(Relation(url=RelationURL(resource="https://x")),)
            ),
        ),
        ValueShapeTestCase(
            body='{"cover-art-archive": [{"front": true}, {"back": true}]}',
            target_type=Release,
            expected=Release(
                cover_art_archive=(
                    CoverArtURL(front=True),
                    CoverArtURL(back=True),
                )
            ),
        ),
        ValueShapeTestCase(
            body='{"cover-art-archive": {"front": true, "count": 1}}',
            target_type=Release,
            expected=Release(cover_art_archive=CoverArtURL(front=True, count=1)),
        ),
    ],
)
def test_value_shapes(test_case: ValueShapeTestCase) -> None:
    assert (
        msgspec.json.decode(test_case.body, type=test_case.target_type)
        == test_case.expected
    )


@pytest.mark.parametrize(
    argnames="artist",
    argvalues=[
        Artist(id="a", area="GB"),
        Artist(id="a", area=Area(name="Bristol")),
        Artist(relations=(Relation(url="https://x"),)),
    ],
)
def test_round_trip_either_shape(artist: Artist) -> None:
    assert (
        msgspec.json.decode(msgspec.json.encode(artist), type=Artist) == artist
    )
