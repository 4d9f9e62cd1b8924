"""
Service Interfaces (Ports) for the PJiFitness Coach API.

This package defines abstract interfaces that decouple use cases from
infrastructure (Shopify, Google Sheets, OpenAI, FoodData Central).
Implementations are provided in the infrastructure layer and backend.services.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations (how it's provided)

Usage:
    from application.ports import CustomerStore

    class SavePlanUseCase:
        def __init__(self, store: CustomerStore):
            self._store = store
"""

# Customer metafields (Shopify)
from application.ports.customer_store import METAFIELD_NAMESPACE, CustomerStore

# Spreadsheet rows (Google Sheets)
from application.ports.sheet_table import SheetTable

# Nutrient database (FoodData Central)
from application.ports.food_lookup import FoodLookup

# Hosted model calls (OpenAI)
from application.ports.language_model import GenerationResult, LanguageModel

__all__ = [
    "METAFIELD_NAMESPACE",
    "CustomerStore",
    "SheetTable",
    "FoodLookup",
    "GenerationResult",
    "LanguageModel",
]
