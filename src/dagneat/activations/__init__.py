"""
Activations Package

This package provides the activation functions available to network nodes.

Exported:
    ActivationKind:   Enumeration of the supported activation functions
    activations:      Dictionary mapping ActivationKind to functions
    activation_codes: Dictionary mapping ActivationKind to 3-letter codes
    Individual activation functions: identity_activation, sigmoid_activation,
                                     relu_activation, tanh_activation
"""

from dagneat.activations.basic_activations import (
    ActivationKind,
    activations,
    activation_codes,
    identity_activation,
    sigmoid_activation,
    relu_activation,
    tanh_activation
)

__all__ = [
    'ActivationKind',
    'activations',
    'activation_codes',
    'identity_activation',
    'sigmoid_activation',
    'relu_activation',
    'tanh_activation'
]
