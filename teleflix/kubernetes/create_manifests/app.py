from .models import APP_SELECTOR_NAME, COMPONENT_SELECTOR_NAME, COMPONENT_SELECTOR_VALUE
from typing import Callable

def get_service_labels_factory() -> Callable[[str], dict[str, str]]:
    def fn(service_name: str) -> dict[str, str]:
        return {
            APP_SELECTOR_NAME: service_name,
            COMPONENT_SELECTOR_NAME: COMPONENT_SELECTOR_VALUE,
        }
    return fn
