from fragsite.rendering.shell import ShellAssets, render_page

__all__ = ["ShellAssets", "render_page"]
