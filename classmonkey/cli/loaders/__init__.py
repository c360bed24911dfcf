from .patch_script_loader import PatchScriptLoader

__all__ = ["PatchScriptLoader"]
