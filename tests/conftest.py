import os

os.environ.setdefault("GRADIENT_CAROUSEL_QUIET", "1")
