from dataclasses import replace
import numpy as np
from .DEFAULTS import DEFAULTS
from .constants import STD_PRESSURE, STD_TEMPERATURE
from .datatypes import (FluidType, DensityUnit, PipeMaterial,
                        ValveInternals, IntermediateValues,
                        EngineeringResult, NoiseInput, describe_formula)
from .data.pipe_specs import get_pipe_spec
from .fluid_physics import (vapor_pressure, saturation_temperature,
                            relative_density, molecular_weight,
                            expansion_factor, Fgamma, pressure_ratio)
from .logger import logger
from .noise import predict_noise, outlet_density
from .opening import valve_opening, validate_opening
from .piping import resolve_geometry
from .reynolds import reynolds_correction
from .sizing import size_liquid, size_gas, size_steam
from .sizing.liquid import C1
from .sizing.gas import gas_kv
from .sizing.steam import steam_kv
from .units import (convert_pressure, convert_temperature,
                    convert_temperature_to_celsius, convert_density,
                    standard_to_actual_density, actual_to_standard_density,
                    convert_viscosity, convert_liquid_flow, convert_gas_flow,
                    convert_steam_flow, kv_to_cv)


def _default(value, default):
    return default if value is None else value


def _flow_area(d):
    """Flow area in m2 of a bore given in mm."""
    return np.pi*(d/1000)**2/4


class KvCalculator:
    """
    Control valve sizing per IEC 60534-2-1 with optional noise prediction
    per IEC 60534-8-3 and IEC 60534-8-4.

    The calculator holds no state; one instance may serve any number of
    concurrent calls.
    """

    def calculate(self, inputs):
        """
        Size a valve.

        Physical problems (non-positive pressures, inlet below vapor
        pressure, ...) are collected in the result's errors rather than
        raised.

        Args:
            inputs (EngineeringInput): Process and valve data.

        Returns:
            EngineeringResult

        Raises:
            ValueError: For unknown unit tags, fluid types or flow
                characteristics.
        """
        # Out-of-range physics yields NaN/inf instead of raising
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return self._calculate(inputs)

    def _calculate(self, inputs):
        errors = []
        warnings = []
        fluid = FluidType(inputs.fluid_type)

        P1 = np.float64(convert_pressure(inputs.inlet_pressure,
                                         inputs.pressure_unit))
        P2 = np.float64(convert_pressure(inputs.outlet_pressure,
                                         inputs.pressure_unit))
        dP = P1 - P2
        T1 = np.float64(convert_temperature(inputs.temperature,
                                            inputs.temperature_unit))
        T_C = convert_temperature_to_celsius(inputs.temperature,
                                             inputs.temperature_unit)

        if P1 <= 0:
            errors.append('Inlet pressure must be greater than 0')
        if P2 < 0:
            errors.append('Outlet pressure cannot be negative')
        if dP <= 0:
            errors.append('Inlet pressure must be greater than outlet '
                          'pressure')

        R = _default(inputs.rangeability, DEFAULTS.rangeability)
        if inputs.rated_kv <= 0:
            errors.append('Rated Kv must be greater than 0')
        if R <= 1:
            errors.append('Rangeability must be greater than 1')
        if not 0 < inputs.FL <= 1:
            errors.append('FL must be greater than 0 and not exceed 1')

        Fd = _default(inputs.Fd, DEFAULTS.Fd)
        xT = _default(inputs.xT, DEFAULTS.xT)
        gamma = _default(inputs.gamma, DEFAULTS.gamma)
        Z = _default(inputs.Z, DEFAULTS.Z)
        FL = np.float64(inputs.FL)

        geometry = resolve_geometry(
            inputs.valve_size, inputs.seat_size,
            upstream=(inputs.upstream_od, inputs.upstream_wall),
            downstream=(inputs.downstream_od, inputs.downstream_wall),
            schedule=_default(inputs.pipe_schedule, DEFAULTS.pipe_schedule))
        d, sumK = geometry.d, geometry.sum_K

        density = convert_density(inputs.density, inputs.density_unit)
        rhoN = None
        if fluid is FluidType.GAS:
            if inputs.density_unit is DensityUnit.KG_NM3:
                rhoN = density
                density = standard_to_actual_density(rhoN, P1, T1)
            else:
                rhoN = actual_to_standard_density(density, P1, T1)

        if inputs.viscosity is not None:
            nu = convert_viscosity(inputs.viscosity,
                                   _default(inputs.viscosity_unit, 'cP'),
                                   _default(inputs.viscosity_type,
                                            'Viscosity'),
                                   density)
        else:
            cP = (DEFAULTS.liquid_viscosity_cP if fluid is FluidType.LIQUID
                  else DEFAULTS.gas_viscosity_cP)
            nu = cP/1000/density

        internals = _default(inputs.valve_internals,
                             ValveInternals(DEFAULTS.valve_internals))
        liquid = {}

        if fluid is FluidType.LIQUID:
            Pv = vapor_pressure(T_C)
            T_sat = saturation_temperature(P1)
            Pc = _default(inputs.critical_pressure, DEFAULTS.Pc)
            if T_C > T_sat:
                errors.append('Medium temperature is above saturation '
                              'temperature')
            if P1 <= Pv:
                errors.append('Inlet pressure is below vapor pressure')

            flow = convert_liquid_flow(inputs.flow_rate, inputs.flow_unit,
                                       density)
            Q = flow
            C_initial = C1(Q, relative_density(density), dP)
            rey = reynolds_correction(Q, nu, C_initial, FL, Fd, d,
                                      geometry.D1, sumK)
            sizing = size_liquid(Q, P1, P2, density, Pv, Pc, FL, Fd,
                                 geometry, inputs.rated_kv, rey.FR,
                                 internals)
            liquid = dict(saturation_temp=T_sat,
                          relative_density=relative_density(density),
                          Pv=Pv, Pc=Pc*1000)
            velocity = Q/_flow_area(d)/3600
            M = None

        elif fluid is FluidType.GAS:
            flow = convert_gas_flow(inputs.flow_rate, inputs.flow_unit, rhoN,
                                    P1, T1)
            M = _default(inputs.molecular_weight, molecular_weight(rhoN))
            Q = flow*(STD_PRESSURE/P1)*(T1/STD_TEMPERATURE)
            x = pressure_ratio(dP, P1)
            Y = expansion_factor(x, Fgamma(gamma), xT)
            C_initial = gas_kv(flow, P1, Y, M, Z, T1, x)
            rey = reynolds_correction(Q, nu, C_initial, FL, Fd, d,
                                      geometry.D1, sumK)
            sizing = size_gas(flow, P1, P2, T1, M, Z, gamma, xT, geometry,
                              rey.FR)
            # Actual volume at outlet pressure
            Q2 = flow*STD_PRESSURE*T1/(P2*STD_TEMPERATURE)
            velocity = Q2/_flow_area(d)/3600

        else:
            flow = convert_steam_flow(inputs.flow_rate, inputs.flow_unit,
                                      density)
            M = _default(inputs.molecular_weight,
                         DEFAULTS.steam_molecular_weight)
            Q = flow/density
            x = pressure_ratio(dP, P1)
            Y = expansion_factor(x, Fgamma(gamma), xT)
            C_initial = steam_kv(flow, Y, x, P1, density)
            rey = reynolds_correction(Q, nu, C_initial, FL, Fd, d,
                                      geometry.D1, sumK)
            sizing = size_steam(flow, P1, P2, T1, density, gamma, xT,
                                geometry, rey.FR, M)
            velocity = flow/(density*P2/P1)/_flow_area(d)/3600

        logger.debug(f"{fluid.value} sizing: {rey.turbulence_state.value} "
                     f"(Rev={rey.Rev:.4g}, FR={rey.FR:.4g}), "
                     f"formula {sizing.variant.value}, "
                     f"{sizing.flow_state.value}")

        opening = valve_opening(sizing.kv, inputs.rated_kv, R,
                                inputs.flow_characteristic)
        _, message = validate_opening(opening)
        if np.isnan(opening):
            errors.append(message)
        elif message is not None:
            warnings.append(message)

        logger.report(f"{fluid.value} sizing", errors, warnings)

        intermediate = IntermediateValues(
            P1=P1, P2=P2, dP=dP, T1=T1, density=density,
            kinematic_viscosity=nu, flow=flow, reynolds_flow=Q, d=d,
            D1=geometry.D1, D2=geometry.D2, K1=geometry.K1, K2=geometry.K2,
            KB1=geometry.KB1, KB2=geometry.KB2, sum_K=sumK, FP=sizing.FP,
            FLP=sizing.FLP if sizing.FLP is not None else FL,
            Rev=rey.Rev, FR=rey.FR, lambda_=rey.lambda_,
            candidates=sizing.candidates, standard_density=rhoN,
            molecular_weight=M,
            gamma=gamma if fluid is not FluidType.LIQUID else None,
            Z=Z if fluid is FluidType.GAS else None,
            FF=sizing.FF, critical_dP=sizing.critical_dP, xF=sizing.xF,
            xFz=sizing.xFz, x=sizing.x, Fgamma=sizing.Fgamma, Y=sizing.Y,
            xT=xT if fluid is not FluidType.LIQUID else None,
            xTP=sizing.xTP, FP_assumed=sizing.FP_assumed, **liquid)

        return EngineeringResult(
            kv=sizing.kv,
            cv=kv_to_cv(sizing.kv),
            opening=opening,
            flow_state=sizing.flow_state,
            turbulence_state=rey.turbulence_state,
            fluid_state=sizing.fluid_state,
            outlet_velocity=velocity,
            formula=sizing.variant,
            used_formula=describe_formula(fluid, sizing.variant),
            has_fittings=geometry.has_fittings,
            intermediate=intermediate,
            warnings=warnings,
            errors=errors)

    def noise_input(self, inputs, result):
        """
        Assemble the noise model inputs for a sized valve.

        Returns:
            NoiseInput or None: None when the downstream pipe cannot be
            resolved.
        """
        if (inputs.downstream_od is not None
                and inputs.downstream_wall is not None):
            Di = inputs.downstream_od - 2*inputs.downstream_wall
            tp = inputs.downstream_wall
        else:
            schedule = _default(inputs.pipe_schedule, DEFAULTS.pipe_schedule)
            spec = get_pipe_spec(inputs.valve_size, schedule)
            if spec is None:
                logger.warn(f"No pipe data for DN{inputs.valve_size} "
                            f"schedule {schedule}, noise not calculated")
                return None
            Di, tp = spec.inner_diameter, spec.wall

        iv = result.intermediate
        fluid = FluidType(inputs.fluid_type)
        common = dict(
            fluid_type=fluid, P1=iv.P1, P2=iv.P2, dP=iv.dP, T1=iv.T1,
            density=iv.density, kv=result.kv, cv=result.cv, FL=inputs.FL,
            Fd=_default(inputs.Fd, DEFAULTS.Fd), Di=Di, tp=tp, d=iv.d,
            pipe_material=_default(inputs.pipe_material,
                                   PipeMaterial(DEFAULTS.pipe_material)),
            valve_internals=_default(
                inputs.valve_internals,
                ValveInternals(DEFAULTS.valve_internals)))

        if fluid is FluidType.LIQUID:
            return NoiseInput(mass_flow=iv.flow*iv.density, Pv=iv.Pv,
                              sound_speed=DEFAULTS.liquid_sound_speed,
                              **common)

        if fluid is FluidType.GAS:
            mass_flow = iv.flow*iv.standard_density
        else:
            mass_flow = iv.flow

        return NoiseInput(
            mass_flow=mass_flow,
            outlet_density=outlet_density(iv.density, iv.P1, iv.P2),
            gamma=iv.gamma, molecular_weight=iv.molecular_weight,
            **common)

    def calculate_noise(self, inputs, result):
        """
        Predict the valve noise for a completed sizing.

        Never raises for physical reasons: any failure of the noise model
        is logged and reported as None.

        Args:
            inputs (EngineeringInput): Inputs of the sizing call.
            result (EngineeringResult): Result of calculate(inputs).

        Returns:
            NoiseResult or None
        """
        try:
            with np.errstate(divide='raise', invalid='raise',
                             over='raise'):
                noise_input = self.noise_input(inputs, result)
                if noise_input is None:
                    return None
                noise = predict_noise(noise_input)
        except (FloatingPointError, ZeroDivisionError, ValueError,
                OverflowError) as e:
            logger.warn(f"Noise calculation failed: {e}")
            return None

        if not np.isfinite(noise.noise_level):
            logger.warn('Noise calculation returned a non-finite level')
            return None

        logger.report('Noise', warnings=noise.warnings)
        return noise

    def calculate_with_noise(self, inputs, include_noise=True):
        """
        Size a valve and, optionally, predict its noise.

        Args:
            inputs (EngineeringInput): Process and valve data.
            include_noise (bool): Whether to run the noise model.

        Returns:
            EngineeringResult: With noise and noise_result set when the
            noise model produced a result.
        """
        result = self.calculate(inputs)
        if not include_noise:
            return result

        noise = self.calculate_noise(inputs, result)
        if noise is None:
            return result

        return replace(result, noise=noise.noise_level, noise_result=noise)


kv_calculator = KvCalculator()
calculate = kv_calculator.calculate
calculate_with_noise = kv_calculator.calculate_with_noise
