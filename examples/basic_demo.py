from text_plugin import Context, PluginSpec, TextProcessingPlugin, build_registry, describe_functions, get_operation

def main() -> None:
    # Example 1: static table, host dispatches by name
    registry = build_registry()
    ctx = Context(input="  Hello beautiful world  ")
    for name in registry:
        print(f"{name}: {get_operation(name, registry)(ctx)!r}")

    # Example 2: plugins applied through setup(ctx), localised labels
    registry = build_registry([
        PluginSpec(name="text", plugin_path="text_plugin.text_processing:TextProcessingPlugin", config={"locale": "zh-CN"}),
    ])
    print("wordCount (zh-CN):", registry["wordCount"](ctx))

    print("metadata:", describe_functions(TextProcessingPlugin(), qualified=True))

if __name__ == "__main__":
    main()
