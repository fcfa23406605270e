def hydraulic_diameter(area: float, perimeter: float) -> float:
    """Computes the hydraulic diameter.

    Args:
        area (float): Cross-sectional flow area.
        perimeter (float): Wetted perimeter.

    Returns:
        float: D_H = 4A/P
    """
    return 4 * area / perimeter

def reynolds_rho_u_dh_mu(rho: float, u: float, d_h: float, mu: float) -> float:
    """Computes the Reynolds number as ρuD_H/μ.

    Args:
        rho (float): Fluid density.
        u (float): Mean velocity.
        d_h (float): Hydraulic diameter.
        mu (float): Dynamic viscosity.

    Returns:
        float: Re
    """
    return (rho * u * d_h) / mu

def reynolds_rho_u_4a_mu_p(rho: float, u: float, area: float, mu: float, perimeter: float) -> float:
    """Computes the Reynolds number as ρu4A/μP.

    Args:
        rho (float): Fluid density.
        u (float): Mean velocity.
        area (float): Cross-sectional flow area.
        mu (float): Dynamic viscosity.
        perimeter (float): Wetted perimeter.

    Returns:
        float: Re
    """
    return (rho * u * 4 * area) / (mu * perimeter)

def reynolds_rho_q_dh_mu_a(rho: float, q: float, d_h: float, mu: float, area: float) -> float:
    """Computes the Reynolds number as ρQD_H/μA.

    Args:
        rho (float): Fluid density.
        q (float): Flow rate.
        d_h (float): Hydraulic diameter.
        mu (float): Dynamic viscosity.
        area (float): Cross-sectional flow area.

    Returns:
        float: Re
    """
    return (rho * q * d_h) / (mu * area)

def reynolds_rho_q4_mu_p(rho: float, q: float, mu: float, perimeter: float) -> float:
    """Computes the Reynolds number as ρQ4/μP.

    Args:
        rho (float): Fluid density.
        q (float): Flow rate.
        mu (float): Dynamic viscosity.
        perimeter (float): Wetted perimeter.

    Returns:
        float: Re
    """
    return (rho * q * 4) / (mu * perimeter)

def reynolds_u_dh_nu(u: float, d_h: float, nu: float) -> float:
    """Computes the Reynolds number as uD_H/ν.

    Args:
        u (float): Mean velocity.
        d_h (float): Hydraulic diameter.
        nu (float): Kinematic viscosity.

    Returns:
        float: Re
    """
    return (u * d_h) / nu

def reynolds_u_4a_nu_p(u: float, area: float, nu: float, perimeter: float) -> float:
    """Computes the Reynolds number as u4A/νP."""
    return (u * 4 * area) / (nu * perimeter)

def reynolds_q_dh_nu_a(q: float, d_h: float, nu: float, area: float) -> float:
    """Computes the Reynolds number as QD_H/νA."""
    return (q * d_h) / (nu * area)

def reynolds_q4_nu_p(q: float, nu: float, perimeter: float) -> float:
    """Computes the Reynolds number as Q4/νP."""
    return (q * 4) / (nu * perimeter)

VARIANTS = {
    'rho_u_dh_mu': reynolds_rho_u_dh_mu,
    'rho_u_4a_mu_p': reynolds_rho_u_4a_mu_p,
    'rho_q_dh_mu_a': reynolds_rho_q_dh_mu_a,
    'rho_q4_mu_p': reynolds_rho_q4_mu_p,
    'u_dh_nu': reynolds_u_dh_nu,
    'u_4a_nu_p': reynolds_u_4a_nu_p,
    'q_dh_nu_a': reynolds_q_dh_nu_a,
    'q4_nu_p': reynolds_q4_nu_p,
}

def reynolds_number(variant: str, **quantities) -> float:
    """
    Computes the Reynolds number using the named formula variant.

    Parameters
    ----------
    variant : str
        One of the keys of ``VARIANTS``, e.g. 'rho_u_dh_mu' or 'q4_nu_p'.
    **quantities
        Keyword arguments of the selected formula (rho, u, q, d_h, area,
        perimeter, mu, nu).

    Returns
    -------
    float
        The Reynolds number.

    """
    if variant not in VARIANTS:
        raise ValueError(f"Invalid Reynolds number variant '{variant}'.")

    return VARIANTS[variant](**quantities)
