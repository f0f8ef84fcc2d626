"""Food analysis domain - photo nutrition facts and nutrition chat."""
