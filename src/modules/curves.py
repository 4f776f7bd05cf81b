from tinyec.ec import SubGroup, Curve
from tinyec.ec import Point, Inf



class Secp256k1:
    # Curve parameters
    p  = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
    n  = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    a  = 0
    b  = 7
    Gx = 55066263022277343669578718895168534326250603453777594175500187360389116729240
    Gy = 32670510020758816978083085130507043184471273380659243275938904335757337482424
    byte_size = 32
    field = SubGroup(p, g =(Gx, Gy), n=n, h=1)
    curve = Curve(a, b, field, name='secp256k1')

    @classmethod
    def generator(cls):
        return Point(cls.curve, cls.Gx, cls.Gy)

    @classmethod
    def lift_x(cls, x_bytes: bytes):
        # BIP340 lift_x: the point with the given x and an even y, or None
        x = int.from_bytes(x_bytes, 'big')
        if x >= cls.p:
            return None
        rhs = (pow(x, 3, cls.p) + cls.a * x + cls.b) % cls.p
        y = pow(rhs, (cls.p + 1) // 4, cls.p)
        if pow(y, 2, cls.p) != rhs:
            return None
        return Point(cls.curve, x, y if y & 1 == 0 else cls.p - y)

    @classmethod
    def has_even_y(cls, point):
        return point.y % 2 == 0

    @classmethod
    def even_y_scalar(cls, point, scalar: int):
        """Scalar matching the even-y twin of ``point``.

        ``point`` must be ``scalar * G``. x-only keys always stand for the
        even-y point, so the secret of an odd-y point is negated.
        """
        return scalar if cls.has_even_y(point) else cls.n - scalar

    @classmethod
    def is_infinity(cls, point):
        return isinstance(point, Inf)

    @classmethod
    def x_bytes(cls, point):
        if cls.is_infinity(point):
            raise ArithmeticError("point at infinity has no x coordinate")
        return point.x.to_bytes(cls.byte_size, 'big')

    @classmethod
    def is_on_curve(cls, point):
        x, y = point.x, point.y
        lhs = y * y % cls.curve.field.p
        rhs = (x**3 + cls.curve.a * x + cls.curve.b) % cls.curve.field.p
        return lhs == rhs
