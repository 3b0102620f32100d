import numpy as np
from enum import Enum

class ActivationKind(Enum):
    """
    Activation functions a node can apply to (sum + bias).
    """
    IDENTITY = "identity"
    SIGMOID  = "sigmoid"
    RELU     = "relu"
    TANH     = "tanh"

def identity_activation(z):
    return z

def sigmoid_activation(z):
    K = 4.9
    Z = K * z
    Z = np.clip(Z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def relu_activation(z):
    return np.maximum(0.0, z)

def tanh_activation(z):
    return np.tanh(z)

activations = {
    ActivationKind.IDENTITY: identity_activation,
    ActivationKind.SIGMOID : sigmoid_activation,
    ActivationKind.RELU    : relu_activation,
    ActivationKind.TANH    : tanh_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    ActivationKind.IDENTITY: "IDN",
    ActivationKind.SIGMOID : "SIG",
    ActivationKind.RELU    : "RLU",
    ActivationKind.TANH    : "TNH"
    }
