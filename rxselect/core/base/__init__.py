from rxselect.core.base.base import RxSelectBase, RxSelectMeta

__all__ = ["RxSelectBase", "RxSelectMeta"]
