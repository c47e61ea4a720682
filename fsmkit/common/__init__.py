from fsmkit.common.jsonnet import FromJsonnet, load_jsonnet  # noqa: F401
