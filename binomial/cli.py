"""CLI de la calculadora de correlación binomial.

Comandos disponibles:
- calculate: Contrasta los spikes de un sub-rango contra la serie completa
- normalize: Muestra los Z-scores de la serie

Los datos se pasan con --data o por stdin (separados por comas y/o
saltos de línea).

Uso:
    python -m binomial.cli calculate --start 0 --end 10 [--threshold 2.0] [--robust] [--json] --data "1,2,3"
    cat datos.csv | python -m binomial.cli calculate --start 20 --end 40
    python -m binomial.cli normalize [--robust] --data "1,2,3"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from binomial.config import DEFAULT_SD_THRESHOLD, LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL
from binomial.exceptions import ValidationError
from binomial.parsing import parse_series
from binomial.runner import run_calculation
from binomial.stats.normalizer import z_normalize

# Configurar logging
logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
    datefmt=LOG_DATE_FORMAT
)
logger = logging.getLogger(__name__)

EXIT_VALIDATION_ERROR = 2


def _read_data(args: argparse.Namespace) -> str:
    """Obtiene el bloque de datos del argumento o de stdin."""
    if args.data is not None:
        return args.data
    return sys.stdin.read()


def cmd_calculate(args: argparse.Namespace) -> int:
    """Ejecuta el cálculo y muestra Low / Current / High y el veredicto."""
    raw = _read_data(args)

    try:
        result = run_calculation(raw, args.start, args.end, args.threshold, args.robust)
    except ValidationError as e:
        logger.info(f"Entrada rechazada ({e.kind})")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
        return 0

    print("\n" + "=" * 40)
    print("CORRELACIÓN BINOMIAL")
    print("=" * 40)
    print(f"Método: {'Robust Z' if result.robust else 'Z-score'}")
    print(f"Spikes en la serie: {result.population_outlier_total} de {result.population_size}")
    print(f"Low: {result.expected_low}")
    print(f"Current: {result.subrange_outlier_count}")
    print(f"High: {result.expected_high}")
    print(result.hypothesis_label)
    print(result.trial_label)

    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    """Muestra un Z-score por línea."""
    series = parse_series(_read_data(args))
    if not series:
        print("ERROR: No hay valores numéricos en los datos.", file=sys.stderr)
        return 1

    for i, z in enumerate(z_normalize(series, robust=args.robust)):
        print(f"{i}\t{series[i]}\t{z:.4f}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada principal."""
    parser = argparse.ArgumentParser(
        description='Binomial Correlation Calculator',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Comando a ejecutar')

    # Comando: calculate
    calc_parser = subparsers.add_parser('calculate', help='Contrastar un sub-rango (H0)')
    calc_parser.add_argument('--start', type=str, default='', help='Start Rec # (inclusivo)')
    calc_parser.add_argument('--end', type=str, default='', help='End Rec # (exclusivo)')
    calc_parser.add_argument(
        '--threshold',
        type=str,
        default=str(DEFAULT_SD_THRESHOLD),
        help='SD Threshold'
    )
    calc_parser.add_argument('--robust', action='store_true', help='Usar Robust Z (mediana/MAD)')
    calc_parser.add_argument('--data', type=str, help='Datos (si se omite se lee stdin)')
    calc_parser.add_argument('--json', action='store_true', help='Salida en JSON')

    # Comando: normalize
    norm_parser = subparsers.add_parser('normalize', help='Mostrar los Z-scores de la serie')
    norm_parser.add_argument('--robust', action='store_true', help='Usar Robust Z (mediana/MAD)')
    norm_parser.add_argument('--data', type=str, help='Datos (si se omite se lee stdin)')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # Ejecutar comando
    commands = {
        'calculate': cmd_calculate,
        'normalize': cmd_normalize,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
