# app.py
import streamlit as st

from horarios.config import SolverConfig, SCORING_STRATEGIES
from horarios.data_loader import loads_schedule
from horarios.errors import ScheduleError, UnsatisfiableInputError
from horarios.report import (
    create_schedule_matrix,
    format_day_hours,
    format_elapsed,
    result_to_dataframe,
    summary_dataframe,
)
from horarios.solver import SolveStatus, TimetableSolver

# --- CONFIGURACIÓN DE PÁGINA ---
st.set_page_config(page_title="Mejores Horarios", layout="wide", initial_sidebar_state="expanded")

EXAMPLE_SCHEDULE = """\
[[Matematicas]]
T1 = "Monday 9:00->11:00"
T2 = "Wednesday 14:00->16:00"

[[Fisica]]
T1 = ["Monday 11:00->12:00", "Thursday 9:00->10:00"]
T2 = "Tuesday 9:00->11:00"

[[Programacion]]
P1 = "Monday 14:00->17:00"
P2 = "Thursday 10:00->13:00"
"""


def main():
    if 'result' not in st.session_state: st.session_state.result = None

    # --- BARRA LATERAL ---
    with st.sidebar:
        st.title("📅 Menú Principal")
        st.markdown("---")
        page = st.radio("Ir a la sección:", ["Cargar Cursos", "Mejores por Días", "Resultados en General"])
        st.markdown("---")
        scoring = st.selectbox("Puntaje", SCORING_STRATEGIES, help="per_day: suma por día | week_span: tramo semanal")
        min_days, max_days = st.slider("Días de interés", 1, 7, (1, 5))
        st.info("Busca el horario con menos tiempo transcurrido\npara cada cantidad de días")

    # 1. CARGA
    if page == "Cargar Cursos":
        st.header("📋 Cursos y Turnos")
        uploaded = st.file_uploader("Archivo TOML/YAML/JSON", type=["toml", "yaml", "yml", "json"])
        if uploaded is not None:
            text = uploaded.getvalue().decode("utf-8")
            fmt = uploaded.name.rsplit(".", 1)[-1].lower()
        else:
            text = st.text_area("Definición (TOML)", EXAMPLE_SCHEDULE, height=300)
            fmt = "toml"
        fmt = "yaml" if fmt == "yml" else fmt

        if st.button("🔎 Buscar Horarios"):
            cfg = SolverConfig(scoring=scoring, min_days=min_days, max_days=max_days)
            try:
                subjects = loads_schedule(text, fmt)
                st.session_state.result = TimetableSolver(subjects, cfg).solve()
                st.session_state.subjects = subjects
            except UnsatisfiableInputError as exc:
                st.session_state.result = None
                st.error(f"Entrada insatisfacible: {exc}")
            except ScheduleError as exc:
                st.session_state.result = None
                st.error(f"Error en el archivo: {exc}")

        result = st.session_state.result
        if result is not None:
            st.metric("Horarios sin choques", result.valid_count, delta=f"de {result.candidates_seen}")
            if result.status is SolveStatus.NO_VALID_TIMETABLE:
                st.warning("No existe ningún horario sin choques.")
            elif result.status is SolveStatus.TRUNCATED_NO_RESULT:
                st.warning("Ninguna de las combinaciones revisadas está libre de choques; el tope dejó combinaciones sin revisar.")
            elif not result.groups:
                st.warning("Ningún horario cae dentro del rango de días configurado.")
            else:
                if result.truncated:
                    st.info("Se alcanzó el tope de combinaciones; el resultado es parcial.")
                st.dataframe(summary_dataframe(result), use_container_width=True)

    # 2. MEJORES POR DÍAS
    elif page == "Mejores por Días":
        st.header("🏆 Mejores Horarios por Cantidad de Días")
        result = st.session_state.result
        if result is None or not result.groups:
            st.warning("Busque horarios primero.")
        else:
            n_days = st.selectbox("Días con clases:", result.day_counts)
            group = result.groups[n_days]
            st.write(f"Tiempo transcurrido mínimo: **{format_elapsed(group.min_elapsed)}** "
                     f"· {len(group.timetables)} opción(es) empatada(s)")
            options = list(range(len(group.timetables)))
            sel = st.selectbox("Opción:", options, format_func=lambda i: group.timetables[i].labels())
            tt = group.timetables[sel]
            st.caption(f"Horas por día: {format_day_hours(tt)}")
            st.dataframe(create_schedule_matrix(tt), use_container_width=True)

    # 3. RESULTADOS EN GENERAL
    elif page == "Resultados en General":
        st.header("✅ Tabla de Resultados")
        result = st.session_state.result
        if result is None:
            st.warning("Busque horarios primero.")
        else:
            df_res = result_to_dataframe(result)
            st.dataframe(df_res, use_container_width=True)
            csv = df_res.to_csv(index=False).encode('utf-8')
            st.download_button("📥 Descargar CSV", data=csv, file_name="mejores_horarios.csv", mime="text/csv")


if __name__ == "__main__":
    main()
