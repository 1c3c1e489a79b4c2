# ==============================================================================
# SISTEMA DE PROFILING Y REGISTRO DE OPERACIONES
# ==============================================================================
# Mide el rendimiento de las operaciones de los gestores y deja registro de
# las operaciones rechazadas (códigos de resultado distintos de 0).
# Guarda logs legibles en LOGS_DIR para análisis humano.
#
# ACTIVAR/DESACTIVAR: clave ENABLE_PROFILING de la configuración
# ==============================================================================

import os
import threading
import time
from collections import defaultdict
from datetime import datetime
from functools import wraps

# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURACIÓN
# ═══════════════════════════════════════════════════════════════════════════

_settings = {
    'enabled': True,
    'logs_dir': os.path.join(os.path.dirname(os.path.abspath(__file__)), 'logs'),
    'threshold_warning': 300,   # Advertencia si supera 300ms
    'threshold_critical': 700,  # Crítico si supera 700ms
}

PERFORMANCE_LOG = 'performance.log'
SLOW_OPERATIONS_LOG = 'slow_operations.log'
REJECTED_OPERATIONS_LOG = 'rejected_operations.log'

# Nombres legibles de las operaciones (para logs más humanos)
OPERATION_NAMES = {
    'create': 'Alta',
    'update': 'Modificación',
    'delete': 'Baja',
    'fetch': 'Consulta',
    'exists': 'Verificación de existencia',
    'list_all': 'Listado completo',
    'list_by_text': 'Búsqueda por texto',
    'fetch_by_text': 'Consulta por texto',
}


def init_profiling(config) -> None:
    """
    Aplica la configuración al sistema de profiling.

    Uso:
        from bricolaje.config import load_config
        init_profiling(load_config())
    """
    _settings['enabled'] = bool(config.get('ENABLE_PROFILING', True))
    _settings['logs_dir'] = config.get('LOGS_DIR', _settings['logs_dir'])
    _settings['threshold_warning'] = config.get('THRESHOLD_WARNING', 300)
    _settings['threshold_critical'] = config.get('THRESHOLD_CRITICAL', 700)


def is_enabled() -> bool:
    return _settings['enabled']


def _log_path(name):
    return os.path.join(_settings['logs_dir'], name)


# ═══════════════════════════════════════════════════════════════════════════
# ESTADÍSTICAS DE OPERACIONES (en memoria)
# ═══════════════════════════════════════════════════════════════════════════

# Estructura: {nombre: {calls: int, total_time: float, max_time: float}}
_function_stats = defaultdict(lambda: {'calls': 0, 'total_time': 0.0, 'max_time': 0.0})
_stats_lock = threading.Lock()
_write_lock = threading.Lock()


# ═══════════════════════════════════════════════════════════════════════════
# FUNCIONES DE LOGGING
# ═══════════════════════════════════════════════════════════════════════════

def _get_timestamp():
    """Obtiene timestamp legible"""
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _write_log(filename, content):
    """Escribe contenido a un archivo de log (thread-safe)"""
    try:
        with _write_lock:
            os.makedirs(_settings['logs_dir'], exist_ok=True)
            with open(_log_path(filename), 'a', encoding='utf-8') as f:
                f.write(content)
    except OSError:
        pass  # Un fallo del log no debe afectar a la operación


def _operation_label(entity_name, operation):
    return f"{OPERATION_NAMES.get(operation, operation)} de {entity_name}"


def log_rejected_operation(entity_name, operation, key, code):
    """
    Registra una operación rechazada (código de resultado distinto de OK).

    Args:
        entity_name: Nombre de la entidad (Position, User, ...)
        operation: create, update o delete
        key: Clave recibida
        code: Miembro del IntEnum de resultados
    """
    if not _settings['enabled']:
        return

    code_name = getattr(code, 'name', str(code))
    log_entry = f"""
[RECHAZADA] {_get_timestamp()}
────────────────────────────────────────
Acción: {_operation_label(entity_name, operation)}
Clave: {key!r}
Resultado: {int(code)} ({code_name})
"""
    _write_log(REJECTED_OPERATIONS_LOG, log_entry)


# ═══════════════════════════════════════════════════════════════════════════
# DECORADOR PARA OPERACIONES DE LOS GESTORES
# ═══════════════════════════════════════════════════════════════════════════

def profile_operation(operation):
    """
    Decorador para medir el rendimiento de un método de un gestor.
    El nombre registrado combina la entidad del gestor y la operación:
    "Position.create", "User.update", ...

    Uso:
        class EntityManager:
            @profile_operation('create')
            def create(self, entity):
                ...
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            if not _settings['enabled']:
                return fn(self, *args, **kwargs)

            func_name = f"{self.entity_name}.{operation}"
            start = time.perf_counter()
            try:
                return fn(self, *args, **kwargs)
            finally:
                elapsed_ms = (time.perf_counter() - start) * 1000
                _record_call(func_name, elapsed_ms)

                # Si es muy lenta, loguear inmediatamente
                if elapsed_ms >= _settings['threshold_warning']:
                    _log_slow_call(
                        func_name, _operation_label(self.entity_name, operation), elapsed_ms
                    )
        return wrapper
    return decorator


def _record_call(func_name, elapsed_ms):
    with _stats_lock:
        stats = _function_stats[func_name]
        stats['calls'] += 1
        stats['total_time'] += elapsed_ms
        if elapsed_ms > stats['max_time']:
            stats['max_time'] = elapsed_ms


def _log_slow_call(func_name, label, time_ms):
    """Registra una llamada lenta"""
    critical = time_ms >= _settings['threshold_critical']
    severity = 'CRÍTICO' if critical else 'LENTO'
    threshold = _settings['threshold_critical'] if critical else _settings['threshold_warning']

    log_entry = f"""
[{severity}] {_get_timestamp()}
Operación: {label} ({func_name})
Tiempo: {time_ms:.0f} ms (umbral: {threshold} ms)
────────────────────────────────────────
"""
    _write_log(SLOW_OPERATIONS_LOG, log_entry)


# ═══════════════════════════════════════════════════════════════════════════
# REPORTE DE ESTADÍSTICAS
# ═══════════════════════════════════════════════════════════════════════════

def get_function_stats():
    """
    Obtiene estadísticas de todas las operaciones perfiladas.

    Returns:
        dict: {nombre: {calls, avg_time, max_time}}
    """
    with _stats_lock:
        result = {}
        for func_name, stats in _function_stats.items():
            calls = stats['calls']
            avg = stats['total_time'] / calls if calls > 0 else 0
            result[func_name] = {
                'calls': calls,
                'avg_time': round(avg, 2),
                'max_time': round(stats['max_time'], 2)
            }
        return result


def write_function_stats_report():
    """
    Escribe un reporte legible de estadísticas en performance.log
    """
    if not _settings['enabled']:
        return

    stats = get_function_stats()
    if not stats:
        return

    # Ordenar por tiempo promedio (mayor primero)
    sorted_stats = sorted(stats.items(), key=lambda x: x[1]['avg_time'], reverse=True)

    report = f"""
══════════════════════════════════════════════════════════════════════
  REPORTE DE RENDIMIENTO DE OPERACIONES
  Generado: {_get_timestamp()}
══════════════════════════════════════════════════════════════════════

"""
    for func_name, data in sorted_stats:
        status = ''
        if data['avg_time'] >= _settings['threshold_critical']:
            status = ' CRÍTICO'
        elif data['avg_time'] >= _settings['threshold_warning']:
            status = ' LENTO'
        elif data['max_time'] >= _settings['threshold_critical']:
            status = ' PICOS ALTOS'

        report += f"""┌─────────────────────────────────────────────────────────────────────
│ OPERACIÓN: {func_name}{status}
├─────────────────────────────────────────────────────────────────────
│ Llamadas totales: {data['calls']}
│ Tiempo promedio:  {data['avg_time']:.0f} ms
│ Tiempo máximo:    {data['max_time']:.0f} ms
└─────────────────────────────────────────────────────────────────────

"""
    _write_log(PERFORMANCE_LOG, report)


def reset_stats():
    """Reinicia todas las estadísticas (útil para testing)"""
    with _stats_lock:
        _function_stats.clear()


# ═══════════════════════════════════════════════════════════════════════════
# FUNCIONES DE UTILIDAD
# ═══════════════════════════════════════════════════════════════════════════

_LOG_FILES = [
    ('performance', PERFORMANCE_LOG),
    ('slow_operations', SLOW_OPERATIONS_LOG),
    ('rejected_operations', REJECTED_OPERATIONS_LOG),
]


def clear_logs():
    """Limpia todos los archivos de log (útil para desarrollo)"""
    for _, filename in _LOG_FILES:
        path = _log_path(filename)
        if os.path.exists(path):
            os.remove(path)


def get_log_summary():
    """
    Obtiene un resumen del estado actual de los logs.

    Returns:
        dict: {archivo: {exists, size_kb, lines}}
    """
    summary = {}
    for name, filename in _LOG_FILES:
        path = _log_path(filename)
        if os.path.exists(path):
            size = os.path.getsize(path) / 1024  # KB
            with open(path, 'r', encoding='utf-8') as f:
                lines = sum(1 for _ in f)
            summary[name] = {'exists': True, 'size_kb': round(size, 2), 'lines': lines}
        else:
            summary[name] = {'exists': False, 'size_kb': 0, 'lines': 0}
    return summary


# ═══════════════════════════════════════════════════════════════════════════
# EXPORTAR API PÚBLICA
# ═══════════════════════════════════════════════════════════════════════════

__all__ = [
    'OPERATION_NAMES',
    'init_profiling',
    'is_enabled',
    'profile_operation',
    'log_rejected_operation',
    'get_function_stats',
    'write_function_stats_report',
    'reset_stats',
    'clear_logs',
    'get_log_summary',
]
