# -*- coding: utf-8 -*-
from .core import MyCopy, __version__

__all__ = ('MyCopy', '__version__')
