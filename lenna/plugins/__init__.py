"""Plugin base classes and the loader that keeps the active plugin instances."""