import asyncio
import base64

import pytest

from interior_designer.api.multimodal.upload_encoder import (
    SelectedFile,
    UploadEncoder,
    encode_data_uri,
    encode_file,
)

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"


def run(coro):
    return asyncio.run(coro)


def test_disallowed_media_type_never_invokes_callback():
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        task = encoder.handle_file_select([SelectedFile("notes.gif", "image/gif", content=b"GIF89a")])
        await asyncio.sleep(0)
        return encoder, task

    encoder, task = run(scenario())

    assert task is None
    assert calls == []
    assert encoder.preview_url is None


def test_valid_jpeg_invokes_callback_once_with_data_uri():
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        await encoder.handle_file_select([SelectedFile("room.jpg", "image/jpeg", content=JPEG_BYTES)])
        return encoder

    encoder = run(scenario())

    assert len(calls) == 1
    assert calls[0].startswith("data:image/jpeg;base64,")
    assert base64.b64decode(calls[0].split(",", 1)[1]) == JPEG_BYTES
    assert encoder.preview_url.startswith("blob:")


def test_drop_reads_png_from_disk(tmp_path):
    photo = tmp_path / "room.png"
    photo.write_bytes(PNG_BYTES)
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        encoder.handle_drag_over()
        assert encoder.is_dragging
        await encoder.handle_drop([SelectedFile.from_path(str(photo))])
        return encoder

    encoder = run(scenario())

    assert not encoder.is_dragging
    assert calls == [encode_data_uri(PNG_BYTES, "image/png")]


def test_only_first_file_is_used():
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        await encoder.handle_file_select(
            [
                SelectedFile("a.png", "image/png", content=PNG_BYTES),
                SelectedFile("b.jpg", "image/jpeg", content=JPEG_BYTES),
            ]
        )

    run(scenario())

    assert len(calls) == 1
    assert calls[0].startswith("data:image/png;base64,")


def test_empty_selection_is_ignored():
    calls = []

    async def scenario():
        return UploadEncoder(calls.append).handle_file_select([])

    assert run(scenario()) is None
    assert calls == []


def test_clear_resets_preview_and_signals_no_image():
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        await encoder.handle_file_select([SelectedFile("room.png", "image/png", content=PNG_BYTES)])
        encoder.clear()
        return encoder

    encoder = run(scenario())

    assert encoder.preview_url is None
    assert calls[-1] == ""
    assert len(calls) == 2


def test_second_selection_does_not_cancel_first():
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        first = encoder.handle_file_select([SelectedFile("a.png", "image/png", content=PNG_BYTES)])
        first_preview = encoder.preview_url
        second = encoder.handle_file_select([SelectedFile("b.jpg", "image/jpeg", content=JPEG_BYTES)])
        await asyncio.gather(first, second)
        return first, first_preview, encoder.preview_url

    first, first_preview, second_preview = run(scenario())

    assert not first.cancelled()
    assert first_preview != second_preview
    assert sorted(uri.split(";")[0] for uri in calls) == ["data:image/jpeg", "data:image/png"]


def test_no_size_limit_is_enforced():
    content = b"\x00" * (11 * 1024 * 1024)

    uri = run(encode_file(SelectedFile("huge.png", "image/png", content=content)))

    assert uri.startswith("data:image/png;base64,")


def test_encode_file_returns_empty_for_unsupported_type():
    assert run(encode_file(SelectedFile("doc.pdf", "application/pdf", content=b"%PDF"))) == ""


def test_from_path_guesses_media_type(tmp_path):
    photo = tmp_path / "kitchen.JPG"
    photo.write_bytes(JPEG_BYTES)

    selected = SelectedFile.from_path(str(photo))

    assert selected.name == "kitchen.JPG"
    assert selected.media_type == "image/jpeg"


def test_failed_read_drops_preview(tmp_path):
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        task = encoder.handle_file_select([SelectedFile.from_path(str(tmp_path / "gone.png"))])
        assert encoder.preview_url is not None
        with pytest.raises(FileNotFoundError):
            await task
        return encoder

    encoder = run(scenario())

    assert encoder.preview_url is None
    assert calls == []


def test_failed_read_keeps_newer_preview(tmp_path):
    calls = []

    async def scenario():
        encoder = UploadEncoder(calls.append)
        failing = encoder.handle_file_select([SelectedFile.from_path(str(tmp_path / "gone.png"))])
        succeeding = encoder.handle_file_select([SelectedFile("b.png", "image/png", content=PNG_BYTES)])
        newer_preview = encoder.preview_url
        results = await asyncio.gather(failing, succeeding, return_exceptions=True)
        return encoder, newer_preview, results

    encoder, newer_preview, results = run(scenario())

    assert isinstance(results[0], FileNotFoundError)
    assert encoder.preview_url == newer_preview
    assert len(calls) == 1
