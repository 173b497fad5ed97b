import os
import uuid

tmp_path = "/tmp/"
tunnel_folder = "tunnel_" + uuid.uuid4().hex
tunnel_path = tmp_path + tunnel_folder + "/"
smt_encoding_path = tunnel_path + "smt_encoding/"

project_path = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

z3_exec = os.environ.get("TUNNEL_Z3", project_path + "/bin/z3")
