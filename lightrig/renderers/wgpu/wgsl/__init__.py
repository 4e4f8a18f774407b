"""The wgsl sources of the lightrig shaders, loaded through jinja2."""
