# -*- coding: utf-8 -*-
"""Fetches a zipped dataset once and unpacks it into a local directory.

The download is skipped entirely when the target directory already exists, so scripts can call it
unconditionally at the top. There is no retry logic: network and HTTP errors come straight from requests.
"""

import os
import shutil
import tempfile
import zipfile

import requests

DEFAULT_CHUNK_SIZE = 1024 * 1024


def download_archive(url, target_dir, timeout=60, chunk_size=DEFAULT_CHUNK_SIZE):
    """Download a zip archive and extract it into `target_dir` unless that directory exists.

    Parameters:
    -----------
    url : str
        URL of the zip archive
    target_dir : str
        Directory the archive contents end up in
    timeout : float
        Timeout in seconds passed to requests
    chunk_size : int
        Size of the chunks streamed to disk

    Returns:
    --------
    target_dir : str
        Path of the directory holding the extracted files
    """
    if os.path.exists(target_dir):
        return target_dir

    parent = os.path.dirname(os.path.abspath(target_dir))
    os.makedirs(parent, exist_ok=True)

    # extract next to the target and rename at the end, so a failed run leaves no target_dir behind
    staging_dir = tempfile.mkdtemp(prefix=".download_", dir=parent)
    try:
        archive_path = os.path.join(staging_dir, "archive.zip")

        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(archive_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=chunk_size):
                    if chunk:
                        f.write(chunk)

        extract_dir = os.path.join(staging_dir, "extracted")
        try:
            with zipfile.ZipFile(archive_path) as archive:
                archive.extractall(extract_dir)
        except zipfile.BadZipFile as e:
            raise ValueError(f"Downloaded file from {url} is not a valid zip archive") from e

        os.replace(extract_dir, target_dir)
    finally:
        shutil.rmtree(staging_dir, ignore_errors=True)

    return target_dir


def list_archive_files(target_dir, extension=None):
    """List the files of an extracted archive.

    Parameters:
    -----------
    target_dir : str
        Directory returned by download_archive
    extension : str, optional
        Only keep files with this extension (e.g. ".shp" or "csv")

    Returns:
    --------
    files : list of str
        Sorted paths relative to `target_dir`
    """
    if extension and not extension.startswith("."):
        extension = f".{extension}"

    files = []
    for root, _, filenames in os.walk(target_dir):
        for filename in filenames:
            if extension and os.path.splitext(filename)[1].lower() != extension.lower():
                continue
            files.append(os.path.relpath(os.path.join(root, filename), target_dir))

    return sorted(files)


def find_file(target_dir, filename):
    """Find a file by name anywhere under `target_dir`.

    Archives often wrap their contents in an extra folder, so the search is recursive.

    Returns:
    --------
    path : str
        Full path of the first match in sorted order
    """
    for relative_path in list_archive_files(target_dir):
        if os.path.basename(relative_path) == filename:
            return os.path.join(target_dir, relative_path)

    raise FileNotFoundError(f"'{filename}' not found under {target_dir}")
