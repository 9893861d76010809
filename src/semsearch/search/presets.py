"""Built-in search presets for the merchant dashboard lists.

Each preset bundles the fields, weights, Spanish thesaurus and tuning used
for one list: sales orders, store users and FAQ entries.
"""

from dataclasses import dataclass, field

from semsearch.config.schema import SearchOptions
from semsearch.exceptions import PresetNotFoundError
from semsearch.search.engine import SearchEngine


@dataclass(frozen=True)
class Preset:
    """Named search configuration."""

    name: str
    description: str
    fields: tuple[str, ...]
    semantic_map: dict[str, list[str]]
    options: SearchOptions = field(default_factory=SearchOptions)

    def create_engine(self, phonetic_cache_size: int = 200) -> SearchEngine:
        """Build an engine configured with this preset."""
        return SearchEngine(
            self.fields,
            self.semantic_map,
            self.options,
            phonetic_cache_size=phonetic_cache_size,
        )


ORDERS = Preset(
    name="orders",
    description="Sales orders: id, client, date, amount, payment method, status",
    fields=("id", "client", "date", "amount", "paymentMethod", "status"),
    semantic_map={
        "aprobado": ["aprobada", "exitoso", "completado", "pagado", "confirmado"],
        "pendiente": ["esperando", "procesando", "en proceso", "por confirmar"],
        "rechazado": ["rechazada", "denegado", "fallido", "error", "no aprobado"],
        "cancelado": ["cancelada", "anulado", "revertido", "devuelto"],
        "expirado": ["expirada", "vencido", "timeout", "tiempo agotado"],
        "qr": ["codigo qr", "código", "escanear"],
        "orden": ["pedido", "compra", "transacción", "venta"],
        "tienda": ["negocio", "establecimiento", "comercio", "sucursal"],
        "pago": ["cobro", "pagar", "payment", "abono"],
        "cliente": ["comprador", "usuario", "consumidor"],
        "hoy": ["hoy", "actual", "reciente"],
        "ayer": ["ayer", "anterior", "pasado"],
    },
    options=SearchOptions(
        score_weights={
            "id": 3,
            "client": 2,
            "status": 2,
            "paymentMethod": 1.5,
            "amount": 1.5,
            "date": 1,
        },
        fuzzy_threshold=0.65,
        number_tolerance=0.20,
    ),
)

USERS = Preset(
    name="users",
    description="Store users: name, email, role, branch, status",
    fields=("name", "email", "role", "branch", "status"),
    semantic_map={
        "administrador": ["admin", "gerente", "manager", "jefe"],
        "vendedor": ["ventas", "comercial", "asesor", "ejecutivo"],
        "supervisor": ["coordinador", "líder", "encargado", "responsable"],
        "activo": ["habilitado", "vigente", "operativo", "trabajando"],
        "inactivo": ["deshabilitado", "baja", "no activo", "pausado"],
        "suspendido": ["bloqueado", "sancionado", "restringido", "penalizado"],
        "centro": ["central", "principal", "matriz"],
        "norte": ["norteño", "septentrional"],
        "sur": ["sureño", "meridional"],
        "este": ["oriente", "oriental", "levante"],
        "oeste": ["occidente", "occidental", "poniente"],
        "sucursal": ["tienda", "local", "sede", "oficina", "filial"],
    },
    options=SearchOptions(
        score_weights={
            "name": 3,
            "email": 2,
            "role": 2,
            "branch": 1.5,
            "status": 1.5,
        },
        fuzzy_threshold=0.70,
        number_tolerance=0.20,
        # User lists carry no amounts
        enable_numeric_search=False,
    ),
)

FAQ = Preset(
    name="faq",
    description="Help center questions: title, content",
    fields=("title", "content"),
    semantic_map={
        "pagar": ["pago", "cobro", "transacción", "dinero", "monto", "método"],
        "pago": ["pagar", "cobro", "transacción", "dinero", "monto", "método"],
        "crear": ["generar", "hacer", "nueva", "agregar", "añadir"],
        "cancelar": ["anular", "eliminar", "borrar", "rechazar", "revertir"],
        "orden": ["pedido", "transacción", "compra", "venta"],
        "qr": ["código", "escanear", "scanner", "cámara", "estatico", "dinamico"],
        "codigo": ["qr", "código", "clave", "número"],
        "tiempo": ["duración", "plazo", "límite", "expirar", "segundos"],
        "error": ["problema", "fallo", "rechazado", "no funciona", "no se procesa"],
        "ver": ["mostrar", "visualizar", "consultar", "revisar", "historial"],
        "actualizar": ["modificar", "cambiar", "editar", "perfil"],
        "descargar": ["guardar", "obtener", "exportar"],
        "estado": ["status", "situación", "aprobado", "pendiente", "rechazado"],
        "kueski": ["kueski pay", "financiamiento", "crédito"],
        "cliente": ["comprador", "usuario", "consumidor"],
        "tienda": ["negocio", "establecimiento", "comercio"],
    },
    options=SearchOptions(
        score_weights={"title": 2, "content": 1},
        fuzzy_threshold=0.70,
        number_tolerance=0.15,
    ),
)

PRESETS: dict[str, Preset] = {preset.name: preset for preset in (ORDERS, USERS, FAQ)}


def get_preset(name: str) -> Preset:
    """Look up a preset by name (case-insensitive).

    Raises:
        PresetNotFoundError: If no preset has that name.
    """
    preset = PRESETS.get(name.strip().lower())
    if preset is None:
        valid = ", ".join(PRESETS)
        raise PresetNotFoundError(f"Unknown preset '{name}'. Valid presets: {valid}")
    return preset


def list_presets() -> list[Preset]:
    """All built-in presets, in definition order."""
    return list(PRESETS.values())
