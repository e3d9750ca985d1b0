"""Infrastructure: filesystem capability, template environment, workspace.

The workspace wires settings, the framework registry, the filesystem, and
the plugin manager into the single dependency injected into services.
"""
