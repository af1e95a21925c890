from flask import Flask, render_template, request, jsonify, send_file
from io import BytesIO
from datetime import date

from pascua.calculo import PascuaError, desglose_computus
from pascua.comparador import describir_pascua, MENSAJE_AÑO_INVALIDO
from pascua.config import cargar_config
from pascua.tabla import tabla_pascua

app = Flask(__name__)
config = cargar_config()


def _leer_hoy():
    """Fecha de referencia: ?hoy=YYYY-MM-DD o la fecha actual"""
    texto = request.args.get('hoy')
    if not texto:
        return date.today()
    return date.fromisoformat(texto)


def _leer_rango():
    """Lee ?desde=&hasta= (por defecto, el año actual)"""
    year_actual = date.today().year
    desde = int(request.args.get('desde', year_actual))
    hasta = int(request.args.get('hasta', desde))
    return desde, hasta


@app.route('/')
def landing():
    """Página principal con el selector de año"""
    hoy = date.today()
    inicial = describir_pascua(hoy.year, hoy)
    return render_template('index.html', valor_inicial=hoy.year, **inicial)


@app.route('/api/pascua/<texto>')
def api_pascua(texto):
    """API que devuelve el Domingo de Pascua y la frase para un año"""
    try:
        hoy = _leer_hoy()
    except ValueError:
        return jsonify({'error': "hoy must be YYYY-MM-DD"}), 400

    resultado = describir_pascua(texto, hoy)

    if 'fecha' not in resultado:
        return jsonify(resultado), 400

    return jsonify(resultado)


@app.route('/api/computus/<int:year>')
def api_computus(year):
    """API que devuelve los valores intermedios del algoritmo"""
    try:
        computus = desglose_computus(year)
    except PascuaError as e:
        return jsonify({'error': str(e), 'msg': MENSAJE_AÑO_INVALIDO}), 400

    return jsonify(computus._asdict())


@app.route('/download-csv')
def download_csv():
    """Descarga las fechas de Pascua en formato CSV"""
    try:
        desde, hasta = _leer_rango()
        df = tabla_pascua(desde, hasta, max_años=config['max_años_tabla'])
    except (PascuaError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    try:
        print(f"🔄 Generando CSV de Pascua: {desde}-{hasta}")
        buffer = BytesIO(df.to_csv(index=False).encode('utf-8'))

        return send_file(
            buffer,
            as_attachment=True,
            download_name=f"pascua_{desde}_{hasta}.csv",
            mimetype='text/csv'
        )

    except Exception as e:
        print(f"❌ Error generando CSV: {e}")
        import traceback
        traceback.print_exc()
        return f"Error generando CSV: {str(e)}", 500


@app.route('/download-xlsx')
def download_xlsx():
    """Descarga las fechas de Pascua en formato Excel"""
    try:
        desde, hasta = _leer_rango()
        df = tabla_pascua(desde, hasta, max_años=config['max_años_tabla'])
    except (PascuaError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    try:
        print(f"🔄 Generando Excel de Pascua: {desde}-{hasta}")

        # Renombrar columnas
        df.columns = ['Año', 'Fecha', 'Fecha (texto)', 'Mes', 'Día']

        buffer = BytesIO()
        df.to_excel(buffer, index=False, engine='openpyxl')
        buffer.seek(0)

        return send_file(
            buffer,
            as_attachment=True,
            download_name=f"pascua_{desde}_{hasta}.xlsx",
            mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
        )

    except Exception as e:
        print(f"❌ Error generando Excel: {e}")
        import traceback
        traceback.print_exc()
        return f"Error generando Excel: {str(e)}", 500


@app.route('/health')
def health():
    """Health check"""
    return jsonify({'status': 'ok'})


if __name__ == '__main__':
    app.run(host=config['host'], port=config['port'], debug=config['debug'])
