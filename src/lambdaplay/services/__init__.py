"""Service layer: one demo per collection operation.

Every demo returns a :class:`~lambdaplay.services.result.DemoResult`.
"""
