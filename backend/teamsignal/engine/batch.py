# engine/batch.py
"""
Fan-out / fan-in pour les calculs indépendants (une équipe = une unité).

Chaque unité est pure et écrit dans son propre slot : l'ordre de
complétion n'a pas d'importance. L'échec d'une unité est capturé dans
`errors[key]` et n'empêche jamais les autres de se terminer.
"""
import concurrent.futures
import logging
from typing import Any, Callable, Dict, Hashable, Mapping, Tuple

logger = logging.getLogger(__name__)


def run_fanout(
    units: Mapping[Hashable, Callable[[], Any]],
    max_workers: int = 4,
) -> Tuple[Dict[Hashable, Any], Dict[Hashable, str]]:
    """
    Args:
        units:       {clé: callable sans argument}
        max_workers: taille du pool

    Returns:
        (results, errors) — chaque clé apparaît dans exactement un des deux
    """
    results: Dict[Hashable, Any] = {}
    errors: Dict[Hashable, str] = {}
    if not units:
        return results, errors

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {executor.submit(fn): key for key, fn in units.items()}

        for future in concurrent.futures.as_completed(futures):
            key = futures[future]
            try:
                results[key] = future.result()
            except Exception as e:
                errors[key] = str(e) or type(e).__name__
                logger.warning(f"Fan-out unit {key} failed: {type(e).__name__}")

    return results, errors
