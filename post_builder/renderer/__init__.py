from .html import render_block, render_post

__all__ = ["render_block", "render_post"]
