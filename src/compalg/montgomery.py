"""Montgomery modular arithmetic for odd moduli.

Values are kept in Montgomery form `a * R mod n` with `R = 2**n.bit_length()`, which turns every modular reduction
after a multiplication into shifts and masks. Convert in with `convert`, compute, convert out with `revert`.

Typical usage example:

    mg = Montgomery(1000003)
    x = mg.convert(12345)
    y = mg.pow(x, 65537)
    mg.revert(y)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class Montgomery:
    """Arithmetic modulo an odd integer in Montgomery form.

    All methods except `convert` take and return values already in Montgomery form, in range `[0, mod-1]`.

    Attributes:
        mod: The odd modulus.
        phi: Euler's totient of the modulus, used for inversion. Defaults to `mod - 1` (prime modulus).
        bits: Bit size of R.
    """

    def __init__(self, mod: int, phi: int | None = None) -> None:
        if mod < 3 or mod % 2 == 0:
            raise ValueError("Montgomery modulus must be odd and greater than 1.")
        self.mod = mod
        self.phi = mod - 1 if phi is None else phi
        self.bits = mod.bit_length()
        self._mask = (1 << self.bits) - 1
        self._mod_prime = self._calc_mod_prime()
        self._r2 = pow(1 << self.bits, 2, mod)

    def __repr__(self) -> str:
        return f"Montgomery({self.mod})"

    def _calc_mod_prime(self) -> int:
        """Solve mod * x = -1 (mod R) one bit at a time."""
        res, t, s = 0, 0, 1
        for _ in range(self.bits):
            if t & 1 == 0:
                t += self.mod
                res |= s
            t >>= 1
            s <<= 1
        return res

    def reduce(self, t: int) -> int:
        """Montgomery reduction, `t * R**-1 mod n`, for `0 <= t < mod * R`."""
        u = (t * self._mod_prime) & self._mask
        w = (t + u * self.mod) >> self.bits
        return w - self.mod if w >= self.mod else w

    def convert(self, a: int) -> int:
        """Bring a plain integer into Montgomery form."""
        return self.reduce((a % self.mod) * self._r2)

    def revert(self, a: int) -> int:
        """Bring a Montgomery form value back to a plain residue."""
        return self.reduce(a)

    def one(self) -> int:
        return self.reduce(self._r2)

    def add(self, a: int, b: int) -> int:
        c = a + b
        return c - self.mod if c >= self.mod else c

    def sub(self, a: int, b: int) -> int:
        c = a - b
        return c + self.mod if c < 0 else c

    def mul(self, a: int, b: int) -> int:
        return self.reduce(a * b)

    def sqr(self, a: int) -> int:
        return self.reduce(a * a)

    def pow(self, a: int, e: int) -> int:
        """Square and multiply exponentiation.

        Args:
            a: Base in Montgomery form.
            e: Non-negative exponent, plain integer.

        Returns:
            `a**e` in Montgomery form.

        Raises:
            ValueError: `e` is negative.
        """
        if e < 0:
            raise ValueError("Exponent must be >= 0, use inv() for inverses.")
        x, y = self.one(), a
        while e > 0:
            if e & 1:
                x = self.mul(x, y)
            y = self.sqr(y)
            e >>= 1
        return x

    def inv(self, a: int) -> int:
        """Multiplicative inverse through Euler's theorem, `a**(phi-1)`.

        Only meaningful when `a` is coprime to the modulus and `phi` is its totient.
        """
        return self.pow(a, self.phi - 1)

    def div(self, a: int, b: int) -> int:
        return self.mul(a, self.inv(b))
