import logging
import os
from contextlib import contextmanager

from .curve import G1, G1_RECORD_BYTES, scalar_field
from .exceptions import DeserializationError, DimensionMismatch, SRSPersistenceError
from .group_fft import NAIVE, monomial_to_lagrange
from .polynomial import polynomials_over


def srs_filename(degree):
    return f"srs_{degree}.dat"


class StructuredReferenceString(object):
    """Lagrange basis SRS together with its blinding polynomial.

    Both are fixed at construction time and must have `degree` entries.
    """

    def __init__(self, srs_lagrange, random_poly):
        if len(srs_lagrange) != len(random_poly.coeffs):
            raise DimensionMismatch(
                f"SRS has {len(srs_lagrange)} points but the blinding polynomial "
                f"has {len(random_poly.coeffs)} coefficients"
            )
        self.srs_lagrange = tuple(srs_lagrange)
        self.random_poly = random_poly

    @property
    def degree(self):
        return len(self.srs_lagrange)

    def __len__(self):
        return len(self.srs_lagrange)

    def same_points(self, other):
        """Compares the group elements only, ignoring the blinding polynomial.

        A loaded SRS carries a freshly sampled blinding polynomial, so this is
        the comparison that survives a persist and load round trip.
        """
        return (
            isinstance(other, StructuredReferenceString)
            and self.srs_lagrange == other.srs_lagrange
        )

    def __eq__(self, other):
        # points and blinding polynomial
        return (
            type(other) is StructuredReferenceString
            and self.srs_lagrange == other.srs_lagrange
            and self.random_poly == other.random_poly
        )


def serialize_points(points):
    return b"".join(p.to_bytes() for p in points)


def deserialize_points(data, degree):
    if len(data) != degree * G1_RECORD_BYTES:
        raise DeserializationError(
            f"expected {degree * G1_RECORD_BYTES} bytes for {degree} points, "
            f"got {len(data)}"
        )
    return [
        G1.from_bytes(data[i : i + G1_RECORD_BYTES])
        for i in range(0, len(data), G1_RECORD_BYTES)
    ]


@contextmanager
def _toxic_waste(field):
    # alpha never leaves this scope; the holder is emptied on every exit path
    holder = [field.random_nonzero()]
    try:
        yield holder
    finally:
        holder.clear()


class SRSManager(object):
    def __init__(self, field=None, method=NAIVE, workers=None):
        self.field = field if field is not None else scalar_field()
        self.method = method
        self.workers = workers
        self.poly = polynomials_over(self.field)

    def random_poly(self, degree):
        """Blinding polynomial with `degree` non-zero coefficients."""
        return self.poly([self.field.random_nonzero() for _ in range(degree)])

    def generate(self, degree):
        scale = self.field.random_nonzero()
        g = G1.generator() ** scale

        with _toxic_waste(self.field) as holder:
            alpha = holder[0]
            powers = [self.field(1)] * degree
            for k in range(1, degree):
                powers[k] = powers[k - 1] * alpha
            del alpha
            srs_monomial = [g ** p for p in powers]
            powers.clear()

        srs_lagrange = monomial_to_lagrange(
            srs_monomial, degree, self.field, method=self.method, workers=self.workers
        )
        logging.info(f'Generated SRS of degree {degree}')
        return StructuredReferenceString(srs_lagrange, self.random_poly(degree))

    def persist(self, srs, path):
        try:
            with open(path, "wb") as f:
                f.write(serialize_points(srs.srs_lagrange))
        except OSError as e:
            raise SRSPersistenceError(f"could not write SRS to {path}: {e}") from e
        logging.info(f'Stored SRS of degree {srs.degree} at {path}')

    def load(self, degree, path):
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SRSPersistenceError(f"could not read SRS from {path}: {e}") from e
        srs_lagrange = deserialize_points(data, degree)
        logging.info(f'Loaded SRS of degree {degree} from {path}')
        return StructuredReferenceString(srs_lagrange, self.random_poly(degree))

    def load_or_generate(self, degree, path):
        """
        Loads the SRS at `path` when a file with exactly `degree` records is
        there. Otherwise a fresh SRS is generated and written to `path`.
        """
        if os.path.isfile(path) and os.path.getsize(path) == degree * G1_RECORD_BYTES:
            return self.load(degree, path)
        logging.info(f'No usable SRS at {path}, generating one')
        srs = self.generate(degree)
        self.persist(srs, path)
        return srs
