class EditCommandsError(Exception):
    pass


class VariantError(EditCommandsError, ValueError):
    pass


class KeyInputError(EditCommandsError, ValueError):
    pass
