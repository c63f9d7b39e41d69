from data_designer.plugins.plugin import Plugin, PluginType

thai_reply_plugin = Plugin(
    config_qualified_name="data_designer_thai_reply.config.ThaiReplyColumnConfig",
    impl_qualified_name="data_designer_thai_reply.generator.ThaiReplyColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
