class InvalidArtifactExpressionError(ValueError):
    pass


class InvalidArtifactNameError(ValueError):
    pass


class ConversionError(ValueError):
    pass


class SchemaMappingError(TypeError):
    pass
