from loaders.model_tokens import normalize_model_token
from .catalog_store import load_catalog, load_registry
from .spec_catalog import filter_specs

ALL = 'all'


class SpecService:
    """Read access to the local catalog for the web layer."""

    def __init__(self, specs_path, models_path):
        self.specs_path = specs_path
        self.models_path = models_path

    def list_specs(self, model=None, category=None):
        """
        Returns specs for a model and/or category, in catalog order.

        'all' or an empty value means no filter. The model filter accepts raw
        labels ("ZT-350D") as well as tokens.
        """
        if model and model.lower() != ALL:
            model = normalize_model_token(model) or model.strip().upper()
        else:
            model = None
        if not category or category.lower() == ALL:
            category = None
        return filter_specs(load_catalog(self.specs_path), model=model, category=category)

    def list_models(self):
        """Returns the model registry (sorted by id)."""
        return load_registry(self.models_path)
