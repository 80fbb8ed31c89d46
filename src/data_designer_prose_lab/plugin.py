from data_designer.plugins.plugin import Plugin, PluginType

prose_rewrite_plugin = Plugin(
    config_qualified_name="data_designer_prose_lab.config.ProseRewriteColumnConfig",
    impl_qualified_name="data_designer_prose_lab.generator.ProseRewriteColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

authorship_score_plugin = Plugin(
    config_qualified_name="data_designer_prose_lab.config.AuthorshipScoreColumnConfig",
    impl_qualified_name="data_designer_prose_lab.generator.AuthorshipScoreColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

text_overlap_plugin = Plugin(
    config_qualified_name="data_designer_prose_lab.config.TextOverlapColumnConfig",
    impl_qualified_name="data_designer_prose_lab.generator.TextOverlapColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
