# -*- coding: utf-8 -*-

__all__ = (
    'mccommon', 'mcerrors', 'mcprocedure',
)
