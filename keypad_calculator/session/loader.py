"""Load recorded keypad sessions from text files or archives."""
from pathlib import Path
import tarfile
import tempfile
from typing import Callable, List
import zipfile

import py7zr
from pydantic import FilePath

from keypad_calculator.common.logger import logger


# Session files may start with a byte order mark; "utf-8-sig" drops it
SESSION_ENCODING = "utf-8-sig"


def load_session(session_path: FilePath) -> List[str]:
    """
    Read a keypad session and return its non-empty lines.

    Each line holds key labels separated by whitespace, e.g. "1 2 + 3 =".

    :param FilePath session_path: Plain .txt file or .zip, .tar.xz or .7z archive

    :return: Stripped, non-empty session lines
    :rtype: List[str]
    :raises ValueError: If the archive format is unsupported or contains no .txt file
    """
    if session_path.suffix == ".txt":
        content = session_path.read_text(encoding=SESSION_ENCODING)
    else:
        content = extract_archive(session_path)

    lines = [line.strip() for line in content.splitlines() if line.strip()]
    logger.info(f"📄 Loaded {len(lines)} session line(s) from {session_path}")
    return lines


def extract_archive(archive_path: FilePath) -> str:
    """
    Return the text of the first session (.txt member) stored in an archive.

    Supported formats: .zip, .tar.xz and .7z.

    :param FilePath archive_path: Path to the archive file

    :return: Decoded session text
    :rtype: str
    :raises ValueError: If no .txt member is found or the format is unsupported
    """
    reader = _session_reader(archive_path)
    name, raw = reader(archive_path)
    logger.debug(f"📄 Read session member {name!r} from {archive_path.name}")
    return raw.decode(SESSION_ENCODING)


def _session_reader(archive_path: Path) -> Callable[[Path], tuple[str, bytes]]:
    if archive_path.suffix == ".zip":
        return _read_zip_session
    if archive_path.suffixes[-2:] == [".tar", ".xz"]:
        return _read_tar_xz_session
    if archive_path.suffix == ".7z":
        return _read_7z_session
    raise ValueError(f"📄❌ Unsupported session format: {''.join(archive_path.suffixes)}")


def _read_zip_session(archive_path: Path) -> tuple[str, bytes]:
    with zipfile.ZipFile(archive_path, "r") as zf:
        names = [n for n in zf.namelist() if n.endswith(".txt")]
        if not names:
            raise ValueError(f"📄❌ No session (.txt) in {archive_path.name}")
        return names[0], zf.read(names[0])


def _read_tar_xz_session(archive_path: Path) -> tuple[str, bytes]:
    with tarfile.open(archive_path, "r:xz") as tf:
        members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
        if not members:
            raise ValueError(f"📄❌ No session (.txt) in {archive_path.name}")
        # extractfile streams the member without writing anything to disk
        with tf.extractfile(members[0]) as member:
            return members[0].name, member.read()


def _read_7z_session(archive_path: Path) -> tuple[str, bytes]:
    with py7zr.SevenZipFile(archive_path, mode="r") as archive:
        names = [n for n in archive.getnames() if n.endswith(".txt")]
        if not names:
            raise ValueError(f"📄❌ No session (.txt) in {archive_path.name}")
        # py7zr only extracts to a directory
        with tempfile.TemporaryDirectory() as tmpdir:
            archive.extract(path=tmpdir, targets=[names[0]])
            return names[0], (Path(tmpdir) / names[0]).read_bytes()
