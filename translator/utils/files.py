# -*- coding: utf-8 -*-
import os
from typing import List


def find_files(root: str, ext: str) -> List[str]:
    """
    Recursively collect files under root whose extension equals ext (e.g. ".json").
    Paths are returned joined onto root, sorted for a stable build order.
    Raises OSError when root cannot be listed.
    """
    result: List[str] = []

    def _onerror(err: OSError) -> None:
        raise err

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_onerror):
        for name in filenames:
            if os.path.splitext(name)[1] == ext:
                result.append(os.path.join(dirpath, name))
    result.sort()
    return result


def get_subdirectories(root: str) -> List[str]:
    """
    Names of the immediate subdirectories of root, sorted.
    """
    if not os.path.isdir(root):
        raise NotADirectoryError(root)
    result: List[str] = []
    for name in os.listdir(root):
        path = os.path.join(root, name)
        if os.path.isdir(path):
            result.append(name)
    result.sort()
    return result
