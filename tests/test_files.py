from audioscope.utils.files import exceeds_limit, extract_extension, is_supported, pick_filename


def test_extract_extension() -> None:
    assert extract_extension(None) is None
    assert extract_extension("Song.MP3") == ".mp3"
    assert extract_extension("noext") is None


def test_is_supported() -> None:
    assert is_supported("beat.wav")
    assert is_supported("beat.FLAC")
    assert not is_supported("notes.txt")
    assert not is_supported(None)


def test_exceeds_limit(tmp_path) -> None:
    path = tmp_path / "data.wav"
    path.write_bytes(b"x" * 200)

    assert exceeds_limit(path, 100)
    assert not exceeds_limit(path, 200)
    assert not exceeds_limit(path, None)


def test_pick_filename() -> None:
    assert pick_filename("/music/set/track.wav") == "track.wav"
    assert pick_filename(None, "ogg") == "audio.ogg"
