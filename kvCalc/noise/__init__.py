from ..datatypes import FluidType
from .gas import gas_noise, describe_gas_state, outlet_density
from .liquid import liquid_noise, describe_cavitation_state


def predict_noise(inputs):
    """Run the noise model matching the fluid family of inputs."""
    if FluidType(inputs.fluid_type) is FluidType.LIQUID:
        return liquid_noise(inputs)
    return gas_noise(inputs)
