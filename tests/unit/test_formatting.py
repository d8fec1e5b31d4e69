import pytest

from flowdock.formatting import display_name, format_size, image_tag, short_id
from flowdock.shared.types import ContainerRecord, ContainerState, ImageRecord

HEX_ID = "4f1c2a9be07d6a5d9e8c3b2a1f0e9d8c7b6a5f4e3d2c1b0a9f8e7d6c5b4a3f2e"


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1152, "1.13 KB"),
        (1044480, "1020 KB"),
        (1048576, "1 MB"),
        (1234567, "1.18 MB"),
        (3 * 1024**3, "3 GB"),
    ],
)
def test_format_size(size: int, expected: str) -> None:
    assert format_size(size) == expected


def test_format_size_caps_at_terabytes() -> None:
    assert format_size(1024**5) == "1024 TB"
    assert format_size(1024**6).endswith(" TB")


def test_format_size_has_at_most_two_decimals() -> None:
    number, _unit = format_size(1000 * 1024 + 7).split()
    assert len(number.partition(".")[2]) <= 2


def test_short_id_truncates_container_ids() -> None:
    assert short_id(HEX_ID) == HEX_ID[:12]


def test_short_id_strips_digest_prefix() -> None:
    assert short_id(f"sha256:{HEX_ID}") == HEX_ID[:12]


def test_display_name_strips_leading_separator() -> None:
    container = ContainerRecord(id=HEX_ID, names=("/web", "/alias"), state="running", image="nginx")
    assert display_name(container) == "web"


def test_display_name_falls_back_to_short_id() -> None:
    container = ContainerRecord(id=HEX_ID, names=(), state="exited", image="nginx")
    assert display_name(container) == HEX_ID[:12]


def test_image_tag_placeholder_for_untagged() -> None:
    assert image_tag(ImageRecord(id=f"sha256:{HEX_ID}", repo_tags=(), size=0)) == "<none>:<none>"
    assert image_tag(ImageRecord(id="x", repo_tags=("a:1", "b:2"), size=0)) == "a:1"


@pytest.mark.parametrize(
    "reported, lifecycle",
    [
        ("running", ContainerState.RUNNING),
        ("Running", ContainerState.RUNNING),
        ("exited", ContainerState.NOT_RUNNING),
        ("paused", ContainerState.NOT_RUNNING),
        ("", ContainerState.NOT_RUNNING),
    ],
)
def test_every_state_but_running_counts_as_not_running(reported: str, lifecycle: ContainerState) -> None:
    container = ContainerRecord.from_api({"Id": HEX_ID, "Names": ["/web"], "State": reported, "Image": "nginx"})

    assert container.lifecycle is lifecycle
    assert container.is_running is (lifecycle is ContainerState.RUNNING)
    assert container.state == reported
