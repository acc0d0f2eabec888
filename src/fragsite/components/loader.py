"""Fragment loading from the asset store."""

import logging

from fragsite.assets.store import AssetStore
from fragsite.components.meta import ComponentMeta
from fragsite.errors import FragmentNotFound

logger = logging.getLogger("fragsite.components")


async def load_fragment(store: AssetStore, component: ComponentMeta) -> str:
    """Fetch the fragment body for *component*.

    Always requests the canonical ``component.file`` path, never a
    caller-supplied one.

    Raises:
        FragmentNotFound: If the store answers with a non-2xx status.
    """
    asset = await store.fetch(component.file)
    if not asset.ok:
        logger.info("Fragment %s missing (%d)", component.file, asset.status)
        raise FragmentNotFound(component.file)
    return asset.text()
