# teamforge/domain/categories.py
"""
Interest categories and member categorization.

The category universe is static configuration: a mapping of category name to
its display color and the interest tags that belong to it. A tag belongs to the
first category (in configuration order) that lists it; tags that no category
lists are ignored.

Functions included:
- CategoryIndex.category_of
- CategoryIndex.categories_of
- CategoryIndex.all_interests
- load_category_index
- default_category_index
"""
import json
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional

from teamforge.config.settings import settings
from teamforge.domain.models import Category, InterestOption, Member


INTEREST_CATEGORIES: Dict[str, Dict] = {
    "AI & ML": {
        "color": "#8b5cf6",
        "tags": [
            "Machine Learning", "Deep Learning", "NLP", "Computer Vision",
            "Reinforcement Learning", "Generative AI", "Federated Learning",
            "MLOps", "Neural Architecture", "Transfer Learning", "GANs", "Transformers",
        ],
    },
    "Cloud & Infra": {
        "color": "#3b82f6",
        "tags": [
            "Cloud Architecture", "Cloud Security", "Kubernetes", "Serverless",
            "Microservices", "DevOps", "CI/CD", "Edge-Cloud Hybrid",
            "Distributed Systems", "API Design",
        ],
    },
    "Quantum": {
        "color": "#ec4899",
        "tags": [
            "Quantum Computing", "Quantum ML", "Quantum Cryptography",
            "Quantum Simulation", "Quantum Error Correction", "NISQ Algorithms",
        ],
    },
    "Security & Crypto": {
        "color": "#ef4444",
        "tags": [
            "Encryption", "Zero-Knowledge Proofs", "Homomorphic Encryption",
            "Blockchain", "Cybersecurity", "Post-Quantum Crypto",
            "Secure Multi-Party Computation",
        ],
    },
    "IoT & Edge": {
        "color": "#f59e0b",
        "tags": [
            "IoT Systems", "Edge Computing", "Embedded Systems", "Sensor Fusion",
            "NILM", "Smart Home", "Mesh Networks", "MQTT/CoAP",
        ],
    },
    "Energy & Power": {
        "color": "#10b981",
        "tags": [
            "Power Systems", "Demand Response", "HVAC Optimization", "Grid Analytics",
            "Battery/Storage", "Renewables", "Load Disaggregation", "Virtual Power Plants",
        ],
    },
    "Data & Analytics": {
        "color": "#06b6d4",
        "tags": [
            "Data Engineering", "Data Science", "Signal Processing", "Time Series",
            "Anomaly Detection", "Real-time Analytics", "Data Pipelines",
        ],
    },
    "Product & Strategy": {
        "color": "#f97316",
        "tags": [
            "Product Management", "UX Research", "Patent Strategy", "IP Landscape",
            "Market Analysis", "Prior Art Research", "Technical Writing",
        ],
    },
}


class CategoryIndex:
    """Read-only lookup from interest tag to category."""

    def __init__(self, categories: Iterable[Category]):
        self.categories: List[Category] = list(categories)
        self._by_name = {c.name: c for c in self.categories}
        self._tag_to_category: Dict[str, str] = {}
        for cat in self.categories:
            for tag in cat.tags:
                # first category listing a tag owns it
                self._tag_to_category.setdefault(tag, cat.name)

    @classmethod
    def from_mapping(cls, mapping: Dict[str, Dict]) -> "CategoryIndex":
        """
        Build an index from {name: {"color": str, "tags": [str]}}.

        Example:
        >>> idx = CategoryIndex.from_mapping({"Q": {"color": "#000", "tags": ["Qubits"]}})
        >>> idx.category_of("Qubits")
        'Q'
        """
        categories = []
        for name, body in mapping.items():
            if not isinstance(body, dict) or "tags" not in body:
                raise ValueError(f"category '{name}' must define a tag list")
            categories.append(Category(name=name, color=body.get("color", "#64748b"), tags=list(body["tags"])))
        return cls(categories)

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.categories]

    def __len__(self) -> int:
        return len(self.categories)

    def color_of(self, name: str) -> str:
        return self._by_name[name].color

    def category_of(self, tag: str) -> Optional[str]:
        return self._tag_to_category.get(tag)

    def categories_of(self, member: Member) -> FrozenSet[str]:
        """Set of categories touched by a member's interests. Unknown tags contribute nothing."""
        cats = set()
        for tag in member.interests:
            cat = self._tag_to_category.get(tag)
            if cat is not None:
                cats.add(cat)
        return frozenset(cats)

    def all_interests(self) -> List[InterestOption]:
        """Flattened tag catalog for registration forms, in configuration order."""
        return [
            InterestOption(tag=tag, category=cat.name, color=cat.color)
            for cat in self.categories
            for tag in cat.tags
        ]


def load_category_index(path) -> CategoryIndex:
    """Load a category universe from a JSON file shaped like INTEREST_CATEGORIES."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"categories file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"categories file {path} must contain an object")
    return CategoryIndex.from_mapping(data)


_default_index: Optional[CategoryIndex] = None


def default_category_index() -> CategoryIndex:
    """Built-in workshop categories, or the file named by CATEGORIES_FILE."""
    global _default_index
    if _default_index is None:
        if settings.CATEGORIES_FILE:
            _default_index = load_category_index(settings.CATEGORIES_FILE)
        else:
            _default_index = CategoryIndex.from_mapping(INTEREST_CATEGORIES)
    return _default_index
