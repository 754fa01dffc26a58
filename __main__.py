from static_website import define_stack, export_outputs, load_settings

stack = define_stack(load_settings())
export_outputs(stack)
