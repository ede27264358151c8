"""Template instantiation — copy the template tree, then patch it for the new project.

Provides mirror() for the raw copy, postprocess() for the ignore-file and
package.json fixes, and materialize() which ties them together behind the
"target must not exist" precondition.
"""
